import urllib.request

import pytest

from portfolio_forge.compiler import Bundle
from portfolio_forge.preview import SCRIPT_TAG, STYLE_LINK, inline_bundle
from portfolio_forge.temp_server import TempHTMLServer
from portfolio_forge.variants import get_compiler


class TestInlineBundle:
    def test_replaces_placeholders(self):
        bundle = Bundle(
            f"<html><head>{STYLE_LINK}</head><body>{SCRIPT_TAG}</body></html>",
            "body { margin: 0; }",
            "console.log('hi');",
        )
        html = inline_bundle(bundle)
        assert STYLE_LINK not in html
        assert SCRIPT_TAG not in html
        assert "<style>\nbody { margin: 0; }</style>" in html
        assert "<script>\nconsole.log('hi');</script>" in html

    @pytest.mark.parametrize("variant", ["modern", "particle-nexus"])
    def test_compiled_bundle_is_self_contained(self, variant, full_profile):
        bundle = get_compiler(variant).compile(full_profile)
        html = inline_bundle(bundle)
        assert 'href="style.css"' not in html
        assert 'src="script.js"' not in html
        assert bundle.script in html


class TestTempHTMLServer:
    def test_serves_and_updates(self):
        server = TempHTMLServer(host="127.0.0.1")
        try:
            url = server.start_server({"index.html": "<p>first</p>"})
            assert server.is_server_running()
            with urllib.request.urlopen(url, timeout=5) as resp:
                assert resp.read() == b"<p>first</p>"

            port = server.port
            assert server.update_content({"index.html": "<p>second</p>"}) == url
            assert server.port == port
            with urllib.request.urlopen(url, timeout=5) as resp:
                assert resp.read() == b"<p>second</p>"
        finally:
            server.stop_server()
        assert not server.is_server_running()
        assert server.get_current_url() is None
