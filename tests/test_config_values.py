"""
Tests for config.settings
测试配置项及 HEADLESS 解析规则
"""
import pytest

from config.settings import Settings


class TestHeadlessSetting:
    """测试 HEADLESS 环境变量"""

    def test_default_is_headless(self, monkeypatch):
        """未设置时默认 headless"""
        monkeypatch.delenv("HEADLESS", raising=False)
        assert Settings(_env_file=None).headless is True

    @pytest.mark.parametrize("value", ["false", "False", "FALSE"])
    def test_false_disables_headless(self, monkeypatch, value):
        """只有 false（不区分大小写）会关闭 headless"""
        monkeypatch.setenv("HEADLESS", value)
        assert Settings(_env_file=None).headless is False

    @pytest.mark.parametrize("value", ["true", "0", "no", "off", ""])
    def test_other_values_stay_headless(self, monkeypatch, value):
        """其他取值一律视为 headless"""
        monkeypatch.setenv("HEADLESS", value)
        assert Settings(_env_file=None).headless is True

    def test_bool_passthrough(self):
        assert Settings(_env_file=None, headless=False).headless is False


class TestSettingsDefaults:
    """测试默认值"""

    def test_default_values(self, monkeypatch):
        monkeypatch.delenv("LOG_FILE", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)
        assert config.extract_preview_chars == 500
        assert config.viewport_width == 1280
        assert config.viewport_height == 720
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EXTRACT_PREVIEW_CHARS", "120")
        monkeypatch.setenv("log_level", "DEBUG")
        config = Settings(_env_file=None)
        assert config.extract_preview_chars == 120
        assert config.log_level == "DEBUG"
