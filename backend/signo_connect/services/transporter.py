"""Transporter — server-side orchestration of the Frappe (signodrive.com) transporter flows.

Invariants:
    - Every call goes through FrappeClient; the Frappe token stays on the server
    - Driver directory only lists drivers at or above min_completion percent
    - Posted jobs are returned normalised (core/job_feed.py), never raw
    - Status updates leave capitalised ("paused" → "Paused")
    - Registration phone = country code digits + local number ("+91", "98…" → "9198…")

Design Decisions:
    - Client passed in: routes resolve it via dependency, tests inject a
      MockTransport-backed instance
"""

import logging

from signo_connect.core.driver_directory import filter_frappe_drivers
from signo_connect.core.errors import ResourceNotFoundError
from signo_connect.core.job_feed import (
    build_edit_job_payload, build_post_job_payload, capitalize_status,
    normalize_posted_job, recommend_jobs,
)
from signo_connect.core.profile_completion import transporter_completion
from signo_connect.infrastructure.frappe_client import FrappeClient

logger = logging.getLogger(__name__)

_JOB_FIELDS = (
    "transporter", "title", "description", "type_of_job", "salary", "city",
    "no_of_openings", "requirements",
)


async def list_directory_drivers(
    client: FrappeClient,
    search: str | None,
    tags: list[str] | None,
    min_completion: int,
) -> list[dict]:
    drivers = await client.list_drivers()
    return filter_frappe_drivers(drivers, search, tags, min_completion)


async def list_posted_jobs(client: FrappeClient, transporter: str) -> list[dict]:
    return [normalize_posted_job(j) for j in await client.get_posted_jobs(transporter)]


async def post_job(client: FrappeClient, data: dict) -> dict:
    payload = build_post_job_payload(**{k: data[k] for k in _JOB_FIELDS})
    result = await client.post_job(payload)
    logger.info(f"Job posted for transporter {data['transporter']}")
    return result


async def edit_job(client: FrappeClient, feed_id: str, data: dict) -> dict:
    payload = build_edit_job_payload(feed_id, **{k: data[k] for k in _JOB_FIELDS})
    return await client.update_job(payload)


async def change_job_status(
    client: FrappeClient, job: str, feed_id: str, status: str,
) -> dict:
    return await client.update_job_status(job, feed_id, capitalize_status(status))


async def delete_job(client: FrappeClient, job: str) -> dict:
    result = await client.delete_job(job)
    logger.info(f"Job {job} deleted")
    return result


async def get_profile(client: FrappeClient, phone_number: str) -> dict:
    profile = await client.get_transporter_profile(phone_number)
    if not profile:
        raise ResourceNotFoundError("Transporter", phone_number)
    return {"profile": profile, "completion": transporter_completion(profile)}


def _registration_phone(country_code: str, phone_number: str) -> str:
    digits = "".join(ch for ch in country_code if ch.isdigit())
    return f"{digits}{phone_number}"


async def register_transporter(client: FrappeClient, data: dict) -> dict:
    payload = {
        "name1": data["full_name"],
        "phone_number": _registration_phone(data["country_code"], data["phone_number"]),
        "company_name": data["company_name"],
        "email": data.get("email"),
        "gst": data.get("gst_number"),
        "address": data.get("address"),
        "fleet_size": data.get("fleet_size"),
    }
    created = await client.create_transporter(
        {k: v for k, v in payload.items() if v is not None},
    )
    logger.info(f"Transporter {payload['phone_number']} registered")
    return created


async def update_profile(
    client: FrappeClient, transporter_id: str, changes: dict,
) -> dict:
    return await client.update_transporter(transporter_id, changes)


async def recommended_jobs(client: FrappeClient, limit: int) -> list[dict]:
    return recommend_jobs(await client.list_jobs(), limit)
