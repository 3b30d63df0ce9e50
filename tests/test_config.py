import pytest

from config import Settings


class TestSettings:
    def test_flags(self):
        settings = Settings.from_args(['--slots', '12', '--speed', '0.3', '--debounce-ms', '50',
                                       '--fps', '30', '--log-level', 'debug'])
        assert settings.slots == 12
        assert settings.speed == pytest.approx(0.3)
        assert settings.debounce_ms == 50
        assert settings.fps == 30
        assert settings.log_level == 'DEBUG'

    @pytest.mark.parametrize("argv", [
        ['--slots', '3'],
        ['--speed', '0'],
        ['--debounce-ms', '-1'],
        ['--fps', '0'],
        ['--window', '0'],
        ['--radius', '-5'],
        ['--log-level', 'bogus'],
    ])
    def test_rejects_invalid_values(self, argv):
        with pytest.raises(SystemExit):
            Settings.from_args(argv)

    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv('ORBIT_SLOTS', '24')
        monkeypatch.setenv('ORBIT_LOG_LEVEL', 'warning')
        settings = Settings.from_args([])
        assert settings.slots == 24
        assert settings.log_level == 'WARNING'

    @pytest.mark.parametrize("name, value", [
        ('ORBIT_SLOTS', 'abc'),
        ('ORBIT_SPEED', 'fast'),
        ('ORBIT_LOG_LEVEL', 'bogus'),
        ('ORBIT_WINDOW', '0'),
    ])
    def test_rejects_invalid_environment(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(SystemExit) as excinfo:
            Settings.from_args([])
        assert excinfo.value.code == 2
