import pytest

from browserkit import cli


def test_validate_accepts_valid_phone(capsys):
    cli.run_validate(["phone", "13800138000"])
    assert "Valid phone" in capsys.readouterr().out


def test_validate_exits_on_invalid_value():
    with pytest.raises(SystemExit) as excinfo:
        cli.run_validate(["email", "nope"])
    assert excinfo.value.code == 1


def test_validate_exits_on_unknown_kind():
    with pytest.raises(SystemExit) as excinfo:
        cli.run_validate(["zip", "12345"])
    assert excinfo.value.code == 2


def test_url_encode_and_decode(capsys):
    cli.run_url(["encode", "q=a b", "page=2"])
    assert capsys.readouterr().out.strip() == "?q=a%20b&page=2"

    cli.run_url(["decode", "https://example.com/?q=a%20b&page=2#top"])
    assert capsys.readouterr().out.splitlines() == ["q=a b", "page=2"]


def test_url_encode_rejects_malformed_pair():
    with pytest.raises(SystemExit):
        cli.run_url(["encode", "novalue"])


def test_user_agent_table(capsys):
    cli.run_user_agent(["Mozilla/5.0 (Linux; Android 13) AppleWebKit/537.36 Chrome/120 Mobile"])
    out = capsys.readouterr().out
    assert "android" in out
    assert "yes" in out


def test_checklist_reports_crypto_info(monkeypatch, capsys):
    monkeypatch.delenv("BROWSERKIT_CRYPTO_KEY", raising=False)
    monkeypatch.delenv("BROWSERKIT_STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("BROWSERKIT_RETRY_MAX_ATTEMPTS", raising=False)
    monkeypatch.delenv("BROWSERKIT_RETRY_DELAY", raising=False)
    cli.run_checklist([])
    assert "[INFO] Crypto key/iv not configured" in capsys.readouterr().out
