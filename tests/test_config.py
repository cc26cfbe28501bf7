import pytest

from esdocs.config import DEFAULT_HOST, HostConfig


def test_from_env_reads_es_host():
    config = HostConfig.from_env({"ES_HOST": "10.0.0.5"})

    assert config.host == "10.0.0.5"
    assert config.url == "http://10.0.0.5:9200"


@pytest.mark.parametrize("env", [{}, {"ES_HOST": ""}, {"ES_HOST": "   "}])
def test_from_env_falls_back_to_default(env):
    config = HostConfig.from_env(env)

    assert config.host == DEFAULT_HOST
    assert config.url == f"http://{DEFAULT_HOST}:9200"


def test_from_env_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("ES_HOST", "search.internal")

    assert HostConfig.from_env().url == "http://search.internal:9200"


def test_host_config_is_immutable():
    config = HostConfig()

    with pytest.raises(AttributeError):
        config.host = "elsewhere"
