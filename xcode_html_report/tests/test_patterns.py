import pytest
from hypothesis import given
from hypothesis import strategies as st

from xcode_html_report.config.patterns import default_pattern, parse_patterns
from xcode_html_report.domain.errors import ConfigError


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("", []),
        ("   \n  \n", []),
        ("a/*.xcresult", ["a/*.xcresult"]),
        ("  a/*.xcresult  \n\n b/**/*.xcresult\n", ["a/*.xcresult", "b/**/*.xcresult"]),
        (["x.xcresult", "", "  y.xcresult "], ["x.xcresult", "y.xcresult"]),
    ],
)
def test_parse_patterns_keeps_non_blank_lines(raw, expected):
    assert parse_patterns(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "a/*.xcresult\nb/*.txt",
        "*.xcresult/",
        "results/**",
        "run.XCRESULT",
    ],
)
def test_parse_patterns_rejects_wrong_suffix(raw):
    with pytest.raises(ConfigError, match="must filter for xcresult files"):
        parse_patterns(raw)


@given(st.text(alphabet=st.characters(exclude_characters="\n\r", exclude_categories=("Cs",)), min_size=1))
def test_any_line_without_bundle_suffix_is_rejected(line):
    if not line.strip() or line.strip().endswith(".xcresult"):
        return
    with pytest.raises(ConfigError):
        parse_patterns(["ok.xcresult", line])


def test_default_pattern_searches_any_depth():
    assert default_pattern("/tmp/td") == "/tmp/td/**/*.xcresult"
