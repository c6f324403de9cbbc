"""Job feed — normalising Frappe posted jobs, outgoing payloads and recommendations."""

from signo_connect.core.job_feed import (
    build_edit_job_payload, build_post_job_payload, capitalize_status,
    normalize_posted_job, normalize_status, parse_questions, recommend_jobs,
    salary_value,
)


def test_normalize_full_feed_entry():
    job = {
        "name": "FEED-0001",
        "title": "Driver needed",
        "status": "Pending",
        "created_at": "2025-04-10 09:30:00",
        "questions_json": '[{"question": "Own licence?"}]',
        "transporter": "TRN-001",
        "applications": 4,
        "_job": {
            "no_of_openings": "3", "city": "Pune", "type_of_job": "Part-time",
            "transporter_name": "Anil Logistics", "salary": "25000",
        },
    }
    card = normalize_posted_job(job)
    assert card["feed_id"] == "FEED-0001"
    assert card["no_of_openings"] == 3
    assert card["salary"] == "25000"
    assert card["city"] == "Pune"
    assert card["type_of_job"] == "Part-time"
    assert card["transporter_name"] == "Anil Logistics"
    assert card["status"] == "active"
    assert card["posted_date"] == "2025-04-10"
    assert card["questions"] == [{"question": "Own licence?"}]
    assert card["applications"] == 4


def test_normalize_sparse_entry_uses_defaults():
    card = normalize_posted_job({})
    assert card["title"] == ""
    assert card["salary"] == "Not specified"
    assert card["city"] == "Not specified"
    assert card["type_of_job"] == "Full-time"
    assert card["transporter_name"] == "Your Company"
    assert card["no_of_openings"] == 0
    assert card["posted_date"] is None
    assert card["status"] == "active"


def test_top_level_fields_win_over_nested():
    card = normalize_posted_job({"city": "Nagpur", "_job": {"city": "Pune"}})
    assert card["city"] == "Nagpur"


def test_invalid_questions_json_is_empty():
    assert parse_questions("{not json") == []
    assert parse_questions('{"question": "x"}') == []
    assert parse_questions(None) == []


def test_status_lowercased_and_pending_shown_active():
    assert normalize_status("Paused") == "paused"
    assert normalize_status(None) == "active"


def test_capitalize_status():
    assert capitalize_status("paused") == "Paused"


def test_post_payload_shape():
    payload = build_post_job_payload(
        "TRN-001", "Driver", "Long haul", "Full-time", "30000", "Pune", 2,
        ["Heavy licence", "5 years"],
    )
    assert payload["job"] == {"salary": "30000", "city": "Pune", "no_of_openings": "2"}
    assert payload["questions"] == [
        {"question": "Heavy licence"}, {"question": "5 years"},
    ]
    assert payload["type_of_job"] == "Full-time"


def test_edit_payload_nests_job_details():
    payload = build_edit_job_payload(
        "FEED-1", "TRN-001", "Driver", "d", "Full-time", "30000", "Pune", 1, ["A"],
    )
    assert payload["feed_id"] == "FEED-1"
    assert payload["_job"]["no_of_openings"] == "1"
    assert payload["_job"]["questions"] == [{"question": "A"}]


def test_salary_value_reads_digits():
    assert salary_value("₹25,000 / month") == 25000
    assert salary_value("Negotiable") == 0
    assert salary_value(None) == 0


def test_recommend_jobs_best_paid_first_skipping_unsalaried():
    jobs = [
        {"name": "a", "salary": "₹15,000"},
        {"name": "b", "salary": "25000/month"},
        {"name": "c"},
        {"name": "d", "salary": "Negotiable"},
    ]
    assert [j["name"] for j in recommend_jobs(jobs, limit=2)] == ["b", "a"]
    assert "c" not in [j["name"] for j in recommend_jobs(jobs, limit=10)]
