from cornrow.daemonconfig import (
    AirplaySourceConfig,
    BluetoothSourceConfig,
    DaemonConfig,
    PipelineConfig,
    TcpSinkConfig,
)


def _parse(tmp_path, text):
    path = tmp_path / "cornrowd.conf"
    path.write_text(text)
    config = DaemonConfig(str(path))
    config.parse()
    return config.pipeline_config()


def test_default_file_path():
    assert DaemonConfig().config_file == "/etc/cornrowd.conf"
    assert DaemonConfig("").config_file == "/etc/cornrowd.conf"


def test_missing_file_leaves_everything_disabled(tmp_path):
    config = DaemonConfig(str(tmp_path / "absent.conf"))
    config.parse()
    assert config.pipeline_config() == PipelineConfig()


def test_malformed_file_is_ignored(tmp_path):
    assert _parse(tmp_path, "this is [ not toml") == PipelineConfig()


def test_bluetooth_section_enables_source(tmp_path):
    result = _parse(tmp_path, "[bluetooth_source]\n")
    assert result.bluetooth_config == BluetoothSourceConfig()
    assert result.airplay_config is None
    assert result.tcp_config is None


def test_airplay_defaults(tmp_path):
    result = _parse(tmp_path, "[airplay_source]\n")
    assert result.airplay_config == AirplaySourceConfig("myAirplay", 0, 2000)


def test_airplay_values(tmp_path):
    result = _parse(
        tmp_path, '[airplay_source]\nname = "Kitchen"\nport = 7000\nbuffer_time = 500\n'
    )
    assert result.airplay_config == AirplaySourceConfig("Kitchen", 7000, 500)


def test_tcp_sink_defaults_and_values(tmp_path):
    assert _parse(tmp_path, "[tcp_sink]\n").tcp_config == TcpSinkConfig("127.0.0.1", 4953)
    result = _parse(tmp_path, '[tcp_sink]\nhost = "192.168.0.2"\nport = 1234\n')
    assert result.tcp_config == TcpSinkConfig("192.168.0.2", 1234)


def test_wrong_types_fall_back_to_defaults(tmp_path):
    result = _parse(tmp_path, '[tcp_sink]\nhost = 5\nport = "x"\n')
    assert result.tcp_config == TcpSinkConfig()


def test_pipeline_config_is_a_copy(tmp_path):
    path = tmp_path / "cornrowd.conf"
    path.write_text("[tcp_sink]\n")
    config = DaemonConfig(str(path))
    config.parse()
    first = config.pipeline_config()
    first.tcp_config.port = 1
    assert config.pipeline_config().tcp_config.port == 4953