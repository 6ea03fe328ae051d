import pytest

from cornrow.ble import (
    AUX_CHARACTERISTIC_UUID,
    IO_CAPS_CHARACTERISTIC_UUID,
    PEQ_CHARACTERISTIC_UUID,
    CharacteristicType,
    filters_to_ble,
)
from cornrow.configmanager import AudioConf, ConfigManager, split_filters
from cornrow.persistence import Persistence
from cornrow.types import Filter, FilterType, IoInterface


class FakeAudio(AudioConf):
    def __init__(self):
        self.groups = {}
        self.inputs = []

    def filters(self, group):
        return list(self.groups[group])

    def set_filters(self, group, filters):
        self.groups[group] = list(filters)

    def io_caps(self):
        return []

    def io_conf(self):
        return []

    def set_input(self, interface):
        self.inputs.append(interface)

    def set_output(self, interface):
        self.inputs.append(interface)


class FakeService:
    def __init__(self):
        self.properties = {}

    def set_property(self, key, value):
        self.properties[key] = value


PEAK = Filter(FilterType.PEAK, 100.0, -3.0, 0.71)
LOW_SHELF = Filter(FilterType.LOW_SHELF, 80.0, 2.0, 0.5)
CROSSOVER = Filter(FilterType.CROSSOVER_LR4, 2000.0, 0.0, 0.71)
LOUDNESS = Filter(FilterType.LOUDNESS, 16.0, 10.0, 0.1)


@pytest.fixture
def store(tmp_path):
    return Persistence(str(tmp_path / "audio.conf"))


def test_split_filters():
    invalid = Filter(FilterType.INVALID, 0.0, 0.0, 0.0)
    peq, aux = split_filters([PEAK, CROSSOVER, invalid, LOW_SHELF, LOUDNESS])
    assert peq == [PEAK, LOW_SHELF]
    assert aux == [CROSSOVER, LOUDNESS]


def test_audio_conf_is_abstract():
    with pytest.raises(TypeError):
        AudioConf()


def test_startup_loads_stored_filters(store):
    store.write_config([PEAK, CROSSOVER, LOW_SHELF])
    audio = FakeAudio()
    service = FakeService()
    ConfigManager(audio, store, service)
    assert audio.groups[CharacteristicType.PEQ] == [PEAK, LOW_SHELF]
    assert audio.groups[CharacteristicType.AUX] == [CROSSOVER]
    assert service.properties[PEQ_CHARACTERISTIC_UUID] == filters_to_ble([PEAK, LOW_SHELF])
    assert service.properties[AUX_CHARACTERISTIC_UUID] == filters_to_ble([CROSSOVER])


def test_startup_without_file_publishes_empty_groups(store):
    audio = FakeAudio()
    service = FakeService()
    ConfigManager(audio, store, service)
    assert audio.groups[CharacteristicType.PEQ] == []
    assert service.properties[PEQ_CHARACTERISTIC_UUID] == b""


def test_remote_peq_write_reaches_audio(store):
    audio = FakeAudio()
    manager = ConfigManager(audio, store, FakeService())
    manager.on_property_changed(PEQ_CHARACTERISTIC_UUID, filters_to_ble([PEAK]))
    assert audio.groups[CharacteristicType.PEQ] == [PEAK]


def test_remote_aux_write_accepts_braced_uppercase_key(store):
    audio = FakeAudio()
    manager = ConfigManager(audio, store, FakeService())
    key = "{" + AUX_CHARACTERISTIC_UUID.upper() + "}"
    manager.on_property_changed(key, filters_to_ble([CROSSOVER]))
    assert audio.groups[CharacteristicType.AUX] == [CROSSOVER]


def test_unknown_key_changes_nothing(store):
    store.write_config([PEAK])
    audio = FakeAudio()
    manager = ConfigManager(audio, store, FakeService())
    manager.on_property_changed(IO_CAPS_CHARACTERISTIC_UUID, filters_to_ble([LOW_SHELF]))
    assert audio.groups[CharacteristicType.PEQ] == [PEAK]


def test_write_config_round_trips(store):
    audio = FakeAudio()
    manager = ConfigManager(audio, store, FakeService())
    audio.set_filters(CharacteristicType.PEQ, [PEAK])
    audio.set_filters(CharacteristicType.AUX, [LOUDNESS])
    manager.write_config()
    assert store.read_config() == [PEAK, LOUDNESS]


def test_fake_audio_records_interfaces():
    audio = FakeAudio()
    audio.set_input(IoInterface.from_byte(0x05))
    assert audio.inputs[0].to_byte() == 0x05