# tests/test_admin.py
"""Tests for admin login and catalog management."""

import pytest
from fastapi import status
from sqlalchemy import func, select

from neta_promise.api.v1.dependencies import create_access_token
from neta_promise.models import Post, Submission, Vote


def test_login_with_configured_credentials(client) -> None:
    response = client.post(
        "/api/v1/admin/login",
        json={"email": "admin@example.com", "password": "correct horse battery staple"},
    )
    assert response.status_code == status.HTTP_200_OK
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    me = client.get("/api/v1/admin/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json() == {"email": "admin@example.com"}


@pytest.mark.parametrize(
    ("email", "password"),
    [
        ("admin@example.com", "wrong"),
        ("someone@example.com", "correct horse battery staple"),
    ],
)
def test_login_rejects_bad_credentials(client, email, password) -> None:
    response = client.post("/api/v1/admin/login", json={"email": email, "password": password})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid credentials"


def test_admin_routes_require_a_token(client) -> None:
    response = client.get("/api/v1/admin/overview")
    assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


@pytest.mark.parametrize(
    "token",
    [
        "not-a-jwt",
        create_access_token("intruder@example.com"),
        create_access_token("admin@example.com", {"role": "viewer"}),
    ],
)
def test_admin_routes_reject_foreign_tokens(client, token) -> None:
    response = client.get("/api/v1/admin/overview", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_overview_counts(client, admin_headers, make_post, politician_with_party, make_ad) -> None:
    make_post(politician_with_party)
    make_ad()
    response = client.get("/api/v1/admin/overview", headers=admin_headers)
    assert response.json() == {
        "parties": 1,
        "politicians": 1,
        "posts": 1,
        "ads": 1,
        "submissions": 0,
    }


def test_party_crud(client, admin_headers) -> None:
    created = client.post(
        "/api/v1/admin/parties",
        json={"name": "  Janamat  ", "logo_path": "janamat.png"},
        headers=admin_headers,
    )
    assert created.status_code == status.HTTP_201_CREATED
    party = created.json()
    assert party["name"] == "Janamat"

    updated = client.put(
        f"/api/v1/admin/parties/{party['id']}",
        json={"name": "Janamat Party", "description": "Regional"},
        headers=admin_headers,
    )
    assert updated.status_code == status.HTTP_200_OK
    assert updated.json()["name"] == "Janamat Party"
    assert updated.json()["logo_path"] == "janamat.png"

    deleted = client.delete(f"/api/v1/admin/parties/{party['id']}", headers=admin_headers)
    assert deleted.status_code == status.HTTP_204_NO_CONTENT
    missing = client.delete(f"/api/v1/admin/parties/{party['id']}", headers=admin_headers)
    assert missing.status_code == status.HTTP_404_NOT_FOUND


def test_blank_names_are_rejected(client, admin_headers) -> None:
    response = client.post("/api/v1/admin/parties", json={"name": "   "}, headers=admin_headers)
    assert response.status_code == 422


def test_politician_with_unknown_party_is_rejected(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/admin/politicians",
        json={"name": "Nobody", "party_id": 999},
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_post_party_defaults_to_politician_party(
    client, admin_headers, politician_with_party
) -> None:
    response = client.post(
        "/api/v1/admin/posts",
        json={
            "politician_id": politician_with_party.id,
            "promise_text": "Melamchi water by Dashain",
            "location": "Kathmandu",
            "video_path": "melamchi.mp4",
        },
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["party_id"] == politician_with_party.party_id


def test_post_requires_video(client, admin_headers, politician_with_party) -> None:
    response = client.post(
        "/api/v1/admin/posts",
        json={
            "politician_id": politician_with_party.id,
            "promise_text": "No video",
            "location": "Kathmandu",
        },
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_post_for_unknown_politician_is_rejected(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/admin/posts",
        json={
            "politician_id": 4321,
            "promise_text": "Ghost",
            "location": "Nowhere",
            "video_path": "ghost.mp4",
        },
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_post_update_keeps_media_when_omitted(
    client, admin_headers, make_post, politician_with_party
) -> None:
    post = make_post(politician_with_party)
    original_video = post.video_path

    response = client.put(
        f"/api/v1/admin/posts/{post.id}",
        json={
            "politician_id": politician_with_party.id,
            "promise_text": "Revised wording",
            "location": "Lalitpur",
        },
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["promise_text"] == "Revised wording"
    assert body["video_path"] == original_video


def test_deleting_post_removes_its_votes(
    client, admin_headers, db_session, make_post, politician_with_party, add_votes
) -> None:
    post = make_post(politician_with_party)
    add_votes(post, up=2, down=1)

    response = client.delete(f"/api/v1/admin/posts/{post.id}", headers=admin_headers)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert db_session.execute(select(func.count(Vote.id))).scalar_one() == 0


def test_deleting_politician_removes_their_posts(
    client, admin_headers, db_session, make_post, politician_with_party
) -> None:
    make_post(politician_with_party)
    response = client.delete(
        f"/api/v1/admin/politicians/{politician_with_party.id}", headers=admin_headers
    )
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert db_session.execute(select(func.count(Post.id))).scalar_one() == 0


def test_deleting_party_keeps_politicians_as_independents(
    client, admin_headers, politician_with_party
) -> None:
    party_id = politician_with_party.party_id
    client.delete(f"/api/v1/admin/parties/{party_id}", headers=admin_headers)

    profile = client.get(f"/api/v1/politicians/{politician_with_party.id}").json()
    assert profile["party_id"] is None


def test_admin_lists_are_paged_newest_first(client, admin_headers, make_party) -> None:
    parties = [make_party() for _ in range(12)]

    first = client.get("/api/v1/admin/parties", headers=admin_headers).json()
    assert (first["page"], first["total"], first["total_pages"]) == (1, 12, 2)
    assert [item["id"] for item in first["items"]] == [p.id for p in reversed(parties)][:10]

    second = client.get("/api/v1/admin/parties", params={"page": 2}, headers=admin_headers).json()
    assert len(second["items"]) == 2

    far = client.get("/api/v1/admin/parties", params={"page": str(10**20)}, headers=admin_headers)
    assert far.status_code == status.HTTP_200_OK
    assert (far.json()["items"], far.json()["total"]) == ([], 12)


def test_ad_crud(client, admin_headers) -> None:
    missing_image = client.post(
        "/api/v1/admin/ads",
        json={"title": "Clinic", "contact_url": "https://example.com"},
        headers=admin_headers,
    )
    assert missing_image.status_code == status.HTTP_400_BAD_REQUEST

    created = client.post(
        "/api/v1/admin/ads",
        json={"title": "Clinic", "contact_url": "https://example.com", "image_path": "c.png"},
        headers=admin_headers,
    )
    assert created.status_code == status.HTTP_201_CREATED
    ad_id = created.json()["id"]

    updated = client.put(
        f"/api/v1/admin/ads/{ad_id}",
        json={"title": "Clinic 2", "contact_url": "https://example.com/2"},
        headers=admin_headers,
    )
    assert updated.json()["image_path"] == "c.png"
    assert updated.json()["title"] == "Clinic 2"


def test_submission_review(client, admin_headers, db_session) -> None:
    client.post(
        "/api/v1/submissions",
        json={
            "submitter_name": "Sita",
            "politician_name": "Someone",
            "location": "Biratnagar",
            "video_url": "https://video.example.com/1",
            "promise_text": "Airport expansion",
        },
    )
    listing = client.get("/api/v1/admin/submissions", headers=admin_headers).json()
    assert listing["total"] == 1
    submission_id = listing["items"][0]["id"]

    response = client.delete(f"/api/v1/admin/submissions/{submission_id}", headers=admin_headers)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert db_session.execute(select(func.count(Submission.id))).scalar_one() == 0
