"""Integration tests for the Flask routes in main.py.

Each test swaps main.review_service for one backed by a temporary reviews
directory, then drives the app through Flask's test client.

Run: python -m pytest tests/test_app.py -v
"""

import pytest

import main
from app.data.review_loader import ReviewLoader
from app.services.review_service import ReviewService


_INCEPTION = """---
title: Inception
initialScore: 8
initialDate: 2026-01-01
tags: movie, sci-fi
---
Dreams within dreams.

## History
2026-01-10 | +1
2026-01-20 | -1
"""

_BROKEN = """---
title: Broken
initialScore: not a number
initialDate: 2026-01-01
---
"""


@pytest.fixture
def client(tmp_path, monkeypatch):
    (tmp_path / "inception.md").write_text(_INCEPTION, encoding="utf-8")
    (tmp_path / "broken.md").write_text(_BROKEN, encoding="utf-8")

    loader = ReviewLoader(str(tmp_path), review_files=["inception.md", "broken.md"])
    monkeypatch.setattr(main, "review_service", ReviewService(loader, main.engine))

    main.app.config["TESTING"] = True
    with main.app.test_client() as client:
        yield client


class TestReviewsApi:
    """GET /api/reviews and /api/reviews/<id>."""

    def test_list_scores_as_of_date(self, client):
        resp = client.get("/api/reviews?date=2026-04-01")
        assert resp.status_code == 200
        rows = resp.get_json()
        # broken.md is skipped by the loader
        assert [r["id"] for r in rows] == ["inception"]
        row = rows[0]
        assert row["days_elapsed"] == 90
        assert row["base_score"] == 8
        assert row["current_score"] == 4.0
        assert row["decay_percentage"] == 50
        assert row["ribbon_width"] == 40
        assert row["color"] == "average"
        assert row["tags"] == ["movie", "sci-fi"]

    def test_list_defaults_to_now(self, client):
        resp = client.get("/api/reviews")
        assert resp.status_code == 200
        assert resp.get_json()[0]["days_elapsed"] >= 0

    def test_bad_date_is_400(self, client):
        resp = client.get("/api/reviews?date=01/04/2026")
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_single_review(self, client):
        resp = client.get("/api/reviews/inception?date=2026-01-01")
        assert resp.status_code == 200
        assert resp.get_json()["current_score"] == 8.0

    def test_unknown_review_is_404(self, client):
        resp = client.get("/api/reviews/broken?date=2026-01-01")
        assert resp.status_code == 404

    def test_single_review_bad_date_is_400(self, client):
        assert client.get("/api/reviews/inception?date=soon").status_code == 400


class TestPages:
    """HTML page and config endpoint."""

    def test_home_renders_ribbons(self, client):
        resp = client.get("/?date=2026-04-01")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "Inception" in html
        assert "width: 40%" in html

    def test_home_tolerates_bad_date(self, client):
        assert client.get("/?date=nonsense").status_code == 200

    def test_config_endpoint(self, client):
        resp = client.get("/api/config")
        assert resp.get_json() == {
            "half_life": main.engine.config.half_life,
            "max_score": main.engine.config.max_score,
            "min_display_width": main.engine.config.min_display_width,
        }


_RELAUNCH = """---
title: Relaunch
initialScore: 6
initialDate: 2026-01-01
2026-02-01: relaunch
---
"""

_SET_VALUED = """---
title: Odd
initialScore: 6
initialDate: 2026-01-01
flags: !!set {a, b}
---
"""


class TestOddFrontmatter:
    """Unusual frontmatter must not break the listing for other reviews."""

    def test_date_keyed_and_set_valued_files(self, tmp_path, monkeypatch):
        (tmp_path / "inception.md").write_text(_INCEPTION, encoding="utf-8")
        (tmp_path / "relaunch.md").write_text(_RELAUNCH, encoding="utf-8")
        (tmp_path / "odd.md").write_text(_SET_VALUED, encoding="utf-8")

        loader = ReviewLoader(str(tmp_path), review_files=["inception.md", "relaunch.md", "odd.md"])
        monkeypatch.setattr(main, "review_service", ReviewService(loader, main.engine))

        main.app.config["TESTING"] = True
        with main.app.test_client() as client:
            resp = client.get("/api/reviews?date=2026-04-01")

        assert resp.status_code == 200
        rows = resp.get_json()
        assert [r["id"] for r in rows] == ["inception", "relaunch"]
        assert rows[1]["extra"] == {"2026-02-01": "relaunch"}
