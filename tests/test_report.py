import json

from site_mirror.crawler.models import CrawlReport, PageRecord, TaskOutcome
from site_mirror.report import render_html, render_json


def sample_report() -> CrawlReport:
    report = CrawlReport(seed="https://site.com", output_dir="crawl_output/site.com", duration=2.5)
    report.record_page(PageRecord("https://site.com", 0, 200, "crawl_output/site.com/index.html", 3, 2))
    report.record_page(PageRecord("https://site.com/a", 1, 404, None, 0, 0))
    report.record_error("https://site.com/b", "fetch", "https://site.com/b: connection refused")
    report.record_outcome(TaskOutcome.FETCHED)
    report.record_outcome(TaskOutcome.FETCHED)
    report.record_outcome(TaskOutcome.FETCH_FAILED)
    report.tasks_spawned = 3
    report.peak_in_flight = 2
    return report


def test_report_json_roundtrip_fields():
    data = json.loads(sample_report().json())
    assert data["seed"] == "https://site.com"
    assert data["outcomes"] == {"fetched": 2, "fetch_failed": 1}
    assert data["pages"][1]["path"] is None
    assert data["errors"][0]["kind"] == "fetch"


def test_render_json_creates_parent_dirs(tmp_path):
    out = render_json(sample_report(), tmp_path / "nested" / "report.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["tasks_spawned"] == 3
    assert len(data["pages"]) == 2


def test_render_json_matches_report_serialization(tmp_path):
    report = sample_report()
    compact = render_json(report, tmp_path / "compact.json", pretty=False)
    assert compact.read_text(encoding="utf-8") == report.json()
    pretty = render_json(report, tmp_path / "pretty.json")
    assert pretty.read_text(encoding="utf-8") == report.json(pretty=True)


def test_render_html_with_bundled_template(tmp_path):
    out = render_html(sample_report(), tmp_path / "report.html")
    html = out.read_text(encoding="utf-8")
    assert "Crawl of https://site.com" in html
    assert "https://site.com/a" in html
    assert "connection refused" in html
    assert "2.50" in html


def test_render_html_with_custom_template(tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "report.html.j2").write_text(
        "{{ seed }}|{{ pages|length }}|{{ errors|length }}", encoding="utf-8"
    )
    out = render_html(sample_report(), tmp_path / "custom.html", templates)
    assert out.read_text(encoding="utf-8") == "https://site.com|2|1"
