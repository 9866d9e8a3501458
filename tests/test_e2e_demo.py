"""Run the demo client against the in-process app."""

import e2e_demo


def test_demo_passes_against_working_gateway(client, capsys):
    exit_code = e2e_demo.run_demo(client, "demo.txt", b"payload", "text/plain", as_json=True)

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "ALL ENDPOINTS TESTED SUCCESSFULLY!" in out
    assert '"content_type": "text/plain' in out


def test_demo_helpers(client):
    assert e2e_demo.check_health(client)
    assert e2e_demo.hello(client) == "Hello, File Upload Gateway!"

    key = e2e_demo.upload_file(client, "pic.png", b"png", "image/png")
    assert key.endswith("_pic.png")
    assert any(url.endswith(f"/{key}") for url in e2e_demo.list_files(client))
    assert e2e_demo.download_file(client, key) == (b"png", "image/png")
    assert e2e_demo.download_file(client, "missing.png") is None


def test_demo_fails_when_download_missing(client_for, gateway, capsys):
    class ForgetfulGateway:
        def __init__(self, inner):
            self._inner = inner

        def __getattr__(self, name):
            return getattr(self._inner, name)

        def download(self, key):
            return None

    client = client_for(ForgetfulGateway(gateway))

    assert e2e_demo.run_demo(client, "demo.txt", b"payload", "text/plain") == 1
    assert "uploaded file not found" in capsys.readouterr().out
