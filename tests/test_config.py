import pytest

from dotman import config as config_module
from dotman.config import BaseValues, Config, ConfigError, get_config

GITURL = "https://example.com/dots.git"


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_load_reads_giturl(tmp_path):
    _write(tmp_path / "dotman.conf.toml", f'giturl = "{GITURL}"\n')
    cfg = Config(search_paths=[tmp_path])
    cfg.load()
    assert cfg.values.giturl.value == GITURL


def test_load_accepts_bare_name(tmp_path):
    _write(tmp_path / "dotman.conf", f'giturl = "{GITURL}"\n')
    cfg = Config(search_paths=[tmp_path])
    cfg.load()
    assert cfg.values.giturl.value == GITURL


def test_keys_are_case_insensitive(tmp_path):
    _write(tmp_path / "dotman.conf.toml", f'GitURL = "{GITURL}"\n')
    cfg = Config(search_paths=[tmp_path])
    cfg.load()
    assert cfg.values.giturl.value == GITURL


def test_first_search_path_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    _write(first / "dotman.conf.toml", 'giturl = "https://example.com/first.git"\n')
    _write(second / "dotman.conf.toml", 'giturl = "https://example.com/second.git"\n')
    cfg = Config(search_paths=[first, second])
    cfg.load()
    assert cfg.values.giturl.value == "https://example.com/first.git"


def test_home_is_expanded(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    _write(tmp_path / ".config" / "dotman" / "dotman.conf.toml", f'giturl = "{GITURL}"\n')
    cfg = Config(search_paths=["$HOME/.config/dotman"])
    cfg.load()
    assert cfg.values.giturl.value == GITURL


def test_missing_file_raises(tmp_path):
    cfg = Config(search_paths=[tmp_path])
    with pytest.raises(ConfigError, match=r"\[Config\] error reading config file"):
        cfg.load()


def test_invalid_toml_raises(tmp_path):
    _write(tmp_path / "dotman.conf.toml", "giturl = = broken\n")
    cfg = Config(search_paths=[tmp_path])
    with pytest.raises(ConfigError, match=r"\[Config\] error reading config file"):
        cfg.load()


def test_missing_giturl_raises(tmp_path):
    _write(tmp_path / "dotman.conf.toml", 'other = "x"\n')
    cfg = Config(search_paths=[tmp_path])
    with pytest.raises(ConfigError) as info:
        cfg.load()
    message = str(info.value)
    assert "[Config] error parsing config" in message
    assert "giturl is required" in message


def test_config_str(tmp_path):
    _write(tmp_path / "dotman.conf.toml", f'giturl = "{GITURL}"\n')
    cfg = Config(search_paths=[tmp_path])
    cfg.load()
    assert str(cfg) == f"{{Values: {{Giturl: {GITURL}}}}}"


def test_base_values_validate():
    with pytest.raises(ConfigError, match="giturl is required"):
        BaseValues({}).validate()
    values = BaseValues({"giturl": GITURL})
    values.validate()
    assert str(values) == f"{{Giturl: {GITURL}}}"


@pytest.fixture
def fresh_singleton():
    config_module._load_once.cache_clear()
    yield
    config_module._load_once.cache_clear()


def test_get_config_is_cached(tmp_path, monkeypatch, fresh_singleton):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "dotman.conf.toml", f'giturl = "{GITURL}"\n')
    first = get_config()
    assert first.values.giturl.value == GITURL
    (tmp_path / "dotman.conf.toml").unlink()
    assert get_config() is first


def test_get_config_error_is_cached(tmp_path, monkeypatch, fresh_singleton):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigError):
        get_config()
    _write(tmp_path / "dotman.conf.toml", f'giturl = "{GITURL}"\n')
    with pytest.raises(ConfigError):
        get_config()