import config


def test_env_bool(monkeypatch):
    monkeypatch.setenv("PG_TEST_BOOL", " Yes ")
    assert config._env_bool("PG_TEST_BOOL", False) is True

    monkeypatch.setenv("PG_TEST_BOOL", "off")
    assert config._env_bool("PG_TEST_BOOL", True) is False

    monkeypatch.delenv("PG_TEST_BOOL")
    assert config._env_bool("PG_TEST_BOOL", True) is True


def test_env_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("PG_TEST_INT", "12")
    assert config._env_int("PG_TEST_INT", 3) == 12

    monkeypatch.setenv("PG_TEST_INT", "twelve")
    assert config._env_int("PG_TEST_INT", 3) == 3


def test_env_choice(monkeypatch):
    monkeypatch.setenv("PG_TEST_FLAVOR", "WINDOWS")
    assert config._env_choice("PG_TEST_FLAVOR", ("posix", "windows"), "posix") == "windows"

    monkeypatch.setenv("PG_TEST_FLAVOR", "vms")
    assert config._env_choice("PG_TEST_FLAVOR", ("posix", "windows"), "posix") == "posix"


def test_defaults_are_sane():
    assert config.PATH_FLAVOR in ("posix", "windows")
    assert config.FNMATCH_CACHE_SIZE > 0
    assert config.PROJECT_ROOT.is_absolute()
    assert config.LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
