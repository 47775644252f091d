import os

from loanplan import __version__
from loanplan.presets import POVERTY_GUIDELINES


def _changelog_lines():
    root = os.path.dirname(os.path.dirname(__file__))
    path = os.path.join(root, "CHANGELOG.md")
    assert os.path.exists(path), "CHANGELOG.md should exist"
    with open(path) as f:
        return f.readlines()


def test_changelog_lists_current_release():
    headings = [line.strip()[3:] for line in _changelog_lines() if line.startswith("## ")]
    assert headings and headings[0] == __version__


def test_changelog_mentions_guideline_years():
    text = "".join(_changelog_lines())
    for year in POVERTY_GUIDELINES:
        assert str(year) in text
