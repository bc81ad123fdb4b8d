"""Tests for the provider registry and the echo provider."""

import pytest

from locale_translator.providers import PROVIDERS, load_provider
from locale_translator.providers.echo import EchoProvider
from locale_translator.providers.tencent import TencentTranslateProvider


class TestLoadProvider:
    """Test provider lookup by name."""

    def test_echo(self):
        assert isinstance(load_provider("echo"), EchoProvider)

    def test_case_insensitive_with_kwargs(self):
        provider = load_provider(
            "Tencent",
            secret_id="AKID1",
            secret_key="secret1",
            region="ap-seoul",
            project_id=0,
            timeout=5.0,
        )
        assert isinstance(provider, TencentTranslateProvider)
        assert provider.host == "tmt.ap-seoul.tencentcloudapi.com"
        assert provider.timeout == 5.0

    def test_unknown_provider(self):
        with pytest.raises(ValueError) as excinfo:
            load_provider("babelfish")
        for name in PROVIDERS:
            assert name in str(excinfo.value)


class TestEchoProvider:
    @pytest.mark.asyncio
    async def test_returns_input(self):
        provider = EchoProvider()
        assert await provider.translate("你好", "en") == "你好"
        await provider.close()
