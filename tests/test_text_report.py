"""Tests for the tally and the text report."""

from wp_vulncheck.config import COLUMN_WIDTH, COLUMN_WIDTH_FIRST, MAX_EXIT_CODE
from wp_vulncheck.models import Classification, Vulnerability, VulnResponse
from wp_vulncheck.reports.text_report import format_column, format_row, table_width


def test_format_column_pads():
    assert format_column("abc", 6) == "   abc"
    assert format_column("abc", 6, left=True) == "abc   "
    assert format_column(3) == " " * (COLUMN_WIDTH - 1) + "3"


def test_format_column_truncates_to_width_minus_one():
    assert format_column("abcdefgh", 6) == " abcde"
    assert format_column("abcdefgh", 6, left=True) == "abcde "


def test_long_name_does_not_overflow():
    name = "a-really-long-plugin-slug-that-goes-on-and-on@1.2.3"
    row = format_row([name, 1, ".", "."])

    assert row.startswith(name[:COLUMN_WIDTH_FIRST - 1] + " ")
    assert len(row) == table_width()
    assert row[COLUMN_WIDTH_FIRST:] == format_column(1) + format_column(".") + format_column(".")


def test_mark_tracks_first_seen_order(report):
    report.mark("b@1", Classification.UNKNOWN)
    report.mark("a@1", Classification.VULNERABLE)
    report.mark("b@1", Classification.UNKNOWN)

    assert list(report.items()) == ["b@1", "a@1"]
    assert report.items()["b@1"] == {Classification.UNKNOWN: 2}
    # mark() alone leaves the totals untouched
    assert report.vulnerable_count() == 0


def test_add_vulnerability_deduplicates_by_id(report):
    response = VulnResponse(item="akismet", version="1.0")
    first = Vulnerability(id=10, title="old title", fixed_in="1.1")
    again = Vulnerability(id=10, title="new title", fixed_in="1.1")

    report.add_vulnerability(response, first)
    report.add_vulnerability(response, again)

    assert report.vulnerable_count() == 2
    assert report.details() == {"akismet@1.0": [again]}


def test_empty_report_prints_nothing(report, capsys):
    report.print_report()
    assert capsys.readouterr().out == ""


def test_table_rendering(report):
    unknown = VulnResponse(item="ghost", version="0.1")
    outdated = VulnResponse(item="akismet", version="4.0")
    report.mark_unknown(unknown)
    report.mark_out_of_date(outdated)

    lines = report.render_table()

    assert lines[0] == format_row(["Name", "Unknown", "Out of Date", "Vulnerabilities"])
    assert lines[1] == "=" * (COLUMN_WIDTH_FIRST + 3 * COLUMN_WIDTH)
    assert lines[2] == format_row(["ghost@0.1", 1, ".", "."])
    assert lines[3] == format_row(["akismet@4.0", ".", 1, "."])
    assert lines[4] == "-" * (COLUMN_WIDTH_FIRST + 3 * COLUMN_WIDTH)
    assert lines[5] == format_row(["Total", 1, 1, 0])
    assert report.render_details() == []


def test_header_cells_are_truncated():
    header = format_row(["Name", "Unknown", "Out of Date", "Vulnerabilities"])
    assert header.endswith(" Vulnerabiliti")


def test_detail_listing(report, capsys):
    akismet = VulnResponse(item="akismet", version="1.0")
    jetpack = VulnResponse(item="jetpack", version="2.0")
    report.add_vulnerability(akismet, Vulnerability(
        id=1, title="XSS in comments", vuln_type="XSS", fixed_in="1.1",
        reference_url="https://example.com/1"))
    report.add_vulnerability(jetpack, Vulnerability(
        id=2, title="SQLi in search", vuln_type="SQLI", fixed_in="2.5",
        reference_url="https://example.com/2"))
    report.add_vulnerability(akismet, Vulnerability(
        id=3, title="CSRF", vuln_type="CSRF", fixed_in="1.2"))

    report.print_report()
    out = capsys.readouterr().out.splitlines()

    start = out.index("Vulnerability Report:")
    assert out[start - 2:start] == ["", ""]
    assert out[start + 1:] == [
        "Item\tType\tTitle\tUrl\tFixed in",
        "akismet@1.0\tXSS\tXSS in comments\thttps://example.com/1\t1.1",
        "akismet@1.0\tCSRF\tCSRF\t\t1.2",
        "jetpack@2.0\tSQLI\tSQLi in search\thttps://example.com/2\t2.5",
    ]


def test_exit_code_is_capped(report):
    response = VulnResponse(item="akismet", version="1.0")
    for _ in range(MAX_EXIT_CODE + 10):
        report.mark_vulnerable(response)

    assert report.vulnerable_count() == MAX_EXIT_CODE + 10
    assert report.exit_code() == MAX_EXIT_CODE
