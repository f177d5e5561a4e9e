import ast
from pathlib import Path

from zerodetect_cli import __version__

SETUP = Path(__file__).resolve().parent.parent / "setup.py"


def _setup_keywords():
    tree = ast.parse(SETUP.read_text(encoding="utf-8"))
    call = next(
        node for node in ast.walk(tree)
        if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "setup"
    )
    return {kw.arg: kw.value for kw in call.keywords}


def test_setup_carries_project_metadata():
    keywords = _setup_keywords()
    assert ast.literal_eval(keywords["name"]) == "zerodetect-cli"
    assert ast.literal_eval(keywords["version"]) == __version__
    assert ast.literal_eval(keywords["author"])
    assert ast.literal_eval(keywords["url"]).startswith("https://github.com/")
