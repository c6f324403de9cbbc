"""Job Feed — shaping Frappe job records for transporters and drivers.

Invariants:
    - normalize_posted_job never raises on malformed input (bad questions JSON → [])
    - Top-level fields of a posted job win over its nested "_job" details
    - Status is lower-cased; "pending" is presented as "active"
    - Outgoing statuses are capitalised ("active" → "Active") as Frappe expects
    - recommend_jobs ranks by the digits found in the salary text, highest first,
      and skips jobs without a salary

Design Decisions:
    - Pure functions over dicts: Frappe payloads are loosely typed, Pydantic models
      would reject the partial records Frappe returns
"""

import json
from datetime import datetime

NOT_SPECIFIED = "Not specified"


def _parse_openings(value: object) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def parse_questions(raw: object) -> list[dict]:
    """Questions from the questions_json string, as [{"question": str}]."""
    if not isinstance(raw, str) or not raw:
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return []
    if not isinstance(parsed, list):
        return []
    return [
        {"question": q.get("question")}
        for q in parsed if isinstance(q, dict)
    ]


def _posted_date(raw: object) -> str | None:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(str(raw).replace(" ", "T")).date().isoformat()
    except ValueError:
        return None


def normalize_status(status: str | None) -> str:
    value = (status or "pending").lower()
    return "active" if value == "pending" else value


def normalize_posted_job(job: dict) -> dict:
    """Flatten a Frappe transporter feed entry into the job card shape."""
    details = job.get("_job") or {}
    return {
        "feed_id": job.get("name"),
        "title": job.get("title") or details.get("title") or "",
        "description": job.get("description") or details.get("description") or "",
        "no_of_openings": _parse_openings(details.get("no_of_openings")),
        "salary": job.get("salary") or details.get("salary") or NOT_SPECIFIED,
        "city": job.get("city") or details.get("city") or NOT_SPECIFIED,
        "type_of_job": details.get("type_of_job") or "Full-time",
        "transporter": job.get("transporter") or details.get("transporter"),
        "transporter_name": details.get("transporter_name") or "Your Company",
        "questions": parse_questions(job.get("questions_json")),
        "status": normalize_status(job.get("status") or details.get("status")),
        "posted_date": _posted_date(job.get("created_at")),
        "applications": job.get("applications") or 0,
    }


def capitalize_status(status: str) -> str:
    return status[:1].upper() + status[1:]


def build_post_job_payload(
    transporter: str,
    title: str,
    description: str,
    type_of_job: str,
    salary: str,
    city: str,
    no_of_openings: int,
    requirements: list[str],
) -> dict:
    """Payload for signo_connect.apis.transporter.post_job."""
    return {
        "transporter": transporter,
        "title": title,
        "description": description,
        "type_of_job": type_of_job,
        "job": {
            "salary": salary,
            "city": city,
            "no_of_openings": str(no_of_openings),
        },
        "questions": [{"question": r} for r in requirements],
    }


def build_edit_job_payload(
    feed_id: str,
    transporter: str,
    title: str,
    description: str,
    type_of_job: str,
    salary: str,
    city: str,
    no_of_openings: int,
    requirements: list[str],
) -> dict:
    """Payload for signo_connect.apis.transporter.update_job (content edit)."""
    questions = [{"question": r} for r in requirements]
    return {
        "feed_id": feed_id,
        "transporter": transporter,
        "title": title,
        "description": description,
        "_job": {
            "title": title,
            "description": description,
            "type_of_job": type_of_job,
            "salary": salary,
            "city": city,
            "no_of_openings": str(no_of_openings),
            "questions": questions,
        },
        "questions": questions,
    }


def salary_value(salary: str | None) -> int:
    digits = "".join(ch for ch in (salary or "") if ch.isdigit())
    return int(digits) if digits else 0


def recommend_jobs(jobs: list[dict], limit: int = 2) -> list[dict]:
    """Best-paying jobs first; jobs without a salary are not recommended."""
    with_salary = [j for j in jobs if j.get("salary")]
    ranked = sorted(with_salary, key=lambda j: salary_value(j["salary"]), reverse=True)
    return ranked[:limit]
