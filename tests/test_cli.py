import functools
import httpx
import pytest

from animal_spotter import cli
from http_client import HttpClient

ARGS = ["--base-url", "https://spotter.test/api", "--username", "ben", "--password", "pw"]

def patch_transport(monkeypatch, handler):
    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(cli, "HttpClient", functools.partial(HttpClient, transport=transport))

def test_show_prints_detail(monkeypatch, capsys):
    def handler(request):
        if request.url.path == "/api/users/login":
            return httpx.Response(200, json={"token": "tok"})
        assert request.headers["Authorization"] == "Bearer tok"
        return httpx.Response(200, json={"name": "lion", "timeSeen": 1_577_836_800, "latitude": 1.5})

    patch_transport(monkeypatch, handler)
    cli.main(ARGS + ["show", "lion"])

    out = capsys.readouterr().out
    assert "Name        : lion" in out
    assert "Seen at     : 2020-01-01T00:00:00Z" in out

def test_rejected_token_exits_with_relogin_hint(monkeypatch, capsys):
    def handler(request):
        if request.url.path == "/api/users/login":
            return httpx.Response(200, json={"token": "tok"})
        return httpx.Response(401)

    patch_transport(monkeypatch, handler)
    with pytest.raises(SystemExit) as exc:
        cli.main(ARGS + ["names"])

    assert exc.value.code == 3
    assert "badAuth" in capsys.readouterr().err

def test_failed_login_exits_with_error(monkeypatch, capsys):
    patch_transport(monkeypatch, lambda request: httpx.Response(401))
    with pytest.raises(SystemExit) as exc:
        cli.main(ARGS + ["names"])

    assert exc.value.code == 1
    assert "HTTP 401" in capsys.readouterr().err

def test_missing_credentials_is_usage_error(monkeypatch):
    monkeypatch.delenv("ANIMAL_SPOTTER_USERNAME", raising=False)
    monkeypatch.delenv("ANIMAL_SPOTTER_PASSWORD", raising=False)
    with pytest.raises(SystemExit) as exc:
        cli.main(["names"])
    assert exc.value.code == 2

def test_signup_registers_then_logs_in(monkeypatch, capsys):
    paths = []

    def handler(request):
        paths.append(request.url.path)
        if request.url.path == "/api/users/login":
            return httpx.Response(200, json={"token": "tok"})
        return httpx.Response(200)

    patch_transport(monkeypatch, handler)
    cli.main(ARGS + ["signup"])

    assert paths == ["/api/users/signup", "/api/users/login"]
    assert "Signed up as ben." in capsys.readouterr().out

def test_image_saves_picture(monkeypatch, tmp_path):
    import io
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGB", (4, 4)).save(buf, "PNG")

    def handler(request):
        if request.url.path == "/api/users/login":
            return httpx.Response(200, json={"token": "tok"})
        if request.url.host == "img.test":
            return httpx.Response(200, content=buf.getvalue())
        return httpx.Response(200, json={"name": "lion", "imageURL": "https://img.test/lion.png"})

    patch_transport(monkeypatch, handler)
    output = tmp_path / "lion.png"
    cli.main(ARGS + ["image", "lion", "--output", str(output)])

    assert Image.open(output).size == (4, 4)

def test_image_default_name_stays_in_working_dir(monkeypatch, tmp_path):
    import io
    from PIL import Image

    buf = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buf, "PNG")

    def handler(request):
        if request.url.path == "/api/users/login":
            return httpx.Response(200, json={"token": "tok"})
        if request.url.host == "img.test":
            return httpx.Response(200, content=buf.getvalue())
        return httpx.Response(200, json={"name": "../x", "imageURL": "https://img.test/x.png"})

    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    patch_transport(monkeypatch, handler)
    cli.main(ARGS + ["image", "lion"])

    assert [p.name for p in work.iterdir()] == ["..%2Fx.png"]
    assert not (tmp_path / "x.png").exists()
