import pytest

from pathglob.errors import PatternSyntaxError
from tools import match_name as match_name_tool
from tools import normalize_path as normalize_path_tool
from tools import walk_tree as walk_tree_tool
from resources import pattern_syntax


def test_normalize_path_tool(dummy_mcp):
    normalize_path_tool.register(dummy_mcp)
    fn = dummy_mcp.tools["normalize_path"]

    assert fn(path="/foo/../bar/////baz", flavor="posix") == "/bar/baz"
    assert fn(path="c:\\foo\\bar\\..\\baz", flavor="windows") == "c:\\foo\\baz"


def test_match_name_tool(dummy_mcp):
    match_name_tool.register(dummy_mcp)
    fn = dummy_mcp.tools["match_name"]

    assert fn(name="sabc", pattern="[!a-r]*", case_sensitive=True) is True
    assert fn(name="radfa.c", pattern="[!a-r]*", case_sensitive=True) is False

    with pytest.raises(PatternSyntaxError):
        fn(name="x", pattern="[x")


class FakeWalkSource:
    def __init__(self):
        self.calls = []

    async def walk_tree(self, *, root: str, topdown: bool):
        self.calls.append((root, topdown))
        return [{"dirpath": ".", "dirnames": [], "filenames": ["a"]}]


@pytest.mark.asyncio
async def test_walk_tree_tool_delegates_to_source(dummy_mcp):
    fake_src = FakeWalkSource()
    walk_tree_tool.register(dummy_mcp, source=fake_src)
    fn = dummy_mcp.tools["walk_tree"]

    out = await fn(root="docs", topdown=False)

    assert out == [{"dirpath": ".", "dirnames": [], "filenames": ["a"]}]
    assert fake_src.calls == [("docs", False)]


def test_pattern_syntax_resource(dummy_mcp):
    pattern_syntax.register_resources(dummy_mcp)

    fn, kwargs = dummy_mcp.resources["pathglob://syntax/wildcards"]
    assert kwargs["mime_type"] == "text/plain"
    text = fn()
    assert "[!set]" in text
    assert "**" in text
