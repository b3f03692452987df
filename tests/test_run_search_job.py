import json

import pytest

from neptune_search.core import config
from neptune_search.jobs import run_search


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_build_parser_defaults():
    args = run_search.build_parser().parse_args(["plumbers in Austin"])
    assert args.query == "plumbers in Austin"
    assert args.as_json is False
    assert args.no_ai is False
    assert args.limit is None


def test_main_prints_json(capsys):
    run_search.main(["plumbers in Austin", "--json", "--no-ai"])

    body = json.loads(capsys.readouterr().out)
    assert body["category"] == "plumber"
    assert body["providers"]


def test_main_prints_ranked_table_with_explain(capsys):
    run_search.main(["plumbers in Austin", "--no-ai", "--explain", "--limit", "1"])

    out = capsys.readouterr().out
    assert " 1. " in out
    assert " 2. " not in out
    assert "specialization=" in out


def test_main_rejects_blank_query():
    with pytest.raises(SystemExit) as excinfo:
        run_search.main(["  ", "--no-ai"])
    assert excinfo.value.code == 2


def test_main_exits_on_config_error(monkeypatch):
    monkeypatch.setenv("GEMINI_TIMEOUT", "soon")
    with pytest.raises(SystemExit) as excinfo:
        run_search.main(["plumbers", "--no-ai"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("limit", ["0", "-2", "many"])
def test_build_parser_rejects_invalid_limit(limit):
    with pytest.raises(SystemExit):
        run_search.build_parser().parse_args(["plumbers", "--limit", limit])


def test_build_parser_accepts_positive_limit():
    assert run_search.build_parser().parse_args(["plumbers", "--limit", "3"]).limit == 3
