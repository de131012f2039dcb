import pytest
from httpx import AsyncClient
from uuid import UUID, uuid4
from sqlmodel import select

from src.domain.entities import Enrollment, EnrollmentStatus, LectureMember


async def create_lecture(client: AsyncClient, headers: dict, title: str = "Compilers") -> str:
    response = await client.post("/api/v1/lectures", json={"title": title}, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


async def request_enrollment(client: AsyncClient, headers: dict, lecture_id: str):
    return await client.post(
        "/api/v1/enrollments", json={"lecture_id": lecture_id}, headers=headers
    )


async def confirm(client: AsyncClient, headers: dict, enroll_id: str, action: str):
    return await client.post(
        f"/api/v1/enrollments/{enroll_id}/confirm",
        json={"action": action},
        headers=headers,
    )


@pytest.fixture
def tutor_and_student(create_member, auth_headers):
    """Factory returning (tutor_headers, student_id, student_headers)"""

    async def _setup():
        tutor = await create_member(name="Tutor")
        student = await create_member(name="Student")
        return auth_headers(tutor), student.id, auth_headers(student)

    return _setup


async def link_rows(db_session, lecture_id: str):
    result = await db_session.exec(
        select(LectureMember).where(LectureMember.lecture_id == UUID(lecture_id))
    )
    return result.all()


@pytest.mark.asyncio
async def test_request_enrollment(client: AsyncClient, db_session, tutor_and_student):
    tutor_headers, student_id, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)

    response = await request_enrollment(client, student_headers, lecture_id)

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "WAITING"

    enrollment = await db_session.get(Enrollment, UUID(data["enrollment_id"]))
    assert enrollment.member_id == student_id
    assert enrollment.modified_by == student_id
    assert enrollment.status == EnrollmentStatus.WAITING


@pytest.mark.asyncio
async def test_duplicate_waiting_request_conflicts(
    client: AsyncClient, db_session, tutor_and_student
):
    tutor_headers, student_id, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    await request_enrollment(client, student_headers, lecture_id)

    response = await request_enrollment(client, student_headers, lecture_id)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_ENROLL_REQUEST"

    result = await db_session.exec(
        select(Enrollment).where(Enrollment.member_id == student_id)
    )
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_request_for_unknown_lecture(client: AsyncClient, db_session, tutor_and_student):
    _, _, student_headers = await tutor_and_student()

    response = await request_enrollment(client, student_headers, str(uuid4()))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "LECTURE_NOT_FOUND"

    result = await db_session.exec(select(Enrollment))
    assert result.all() == []


@pytest.mark.asyncio
async def test_request_for_deleted_lecture(client: AsyncClient, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    await client.delete(f"/api/v1/lectures/{lecture_id}", headers=tutor_headers)

    response = await request_enrollment(client, student_headers, lecture_id)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "LECTURE_NOT_FOUND"


@pytest.mark.asyncio
async def test_request_with_malformed_lecture_id(client: AsyncClient, tutor_and_student):
    _, _, student_headers = await tutor_and_student()

    response = await request_enrollment(client, student_headers, "lecture-1")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_LECTURE_ID"


@pytest.mark.asyncio
async def test_accept_links_member_to_lecture(
    client: AsyncClient, db_session, tutor_and_student
):
    tutor_headers, student_id, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    response = await confirm(client, tutor_headers, enroll_id, "ACCEPTED")

    assert response.status_code == 200
    assert response.json() == {"enrollment_id": enroll_id, "status": "ACCEPTED"}

    rows = await link_rows(db_session, lecture_id)
    assert len(rows) == 1
    assert rows[0].member_id == student_id
    assert rows[0].deleted is False


@pytest.mark.asyncio
async def test_second_accept_is_rejected(client: AsyncClient, db_session, tutor_and_student):
    """An accepted enrollment is terminal; no second link row appears"""
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]
    await confirm(client, tutor_headers, enroll_id, "ACCEPTED")

    response = await confirm(client, tutor_headers, enroll_id, "ACCEPTED")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ENROLLMENT_NOT_FOUND"
    assert len(await link_rows(db_session, lecture_id)) == 1


@pytest.mark.asyncio
async def test_reject_creates_no_link(client: AsyncClient, db_session, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    response = await confirm(client, tutor_headers, enroll_id, "REJECTED")

    assert response.status_code == 200
    assert response.json()["status"] == "REJECTED"
    assert await link_rows(db_session, lecture_id) == []


@pytest.mark.asyncio
async def test_joined_member_cannot_request_again(client: AsyncClient, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]
    await confirm(client, tutor_headers, enroll_id, "ACCEPTED")

    response = await request_enrollment(client, student_headers, lecture_id)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_JOIN"


@pytest.mark.asyncio
async def test_accept_for_existing_member_rolls_back(
    client: AsyncClient, db_session, tutor_and_student
):
    """If the applicant is already linked, the enrollment stays WAITING"""
    tutor_headers, student_id, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    db_session.add(
        LectureMember(lecture_id=UUID(lecture_id), member_id=student_id, modified_by=student_id)
    )
    await db_session.commit()

    response = await confirm(client, tutor_headers, enroll_id, "ACCEPTED")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_JOIN"

    enrollment = await db_session.get(Enrollment, UUID(enroll_id))
    assert enrollment.status == EnrollmentStatus.WAITING
    assert len(await link_rows(db_session, lecture_id)) == 1


@pytest.mark.asyncio
async def test_confirm_by_non_owner(client: AsyncClient, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    response = await confirm(client, student_headers, enroll_id, "ACCEPTED")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ENROLLMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_confirm_with_invalid_action(client: AsyncClient, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    for action in ("CANCELLED", "WAITING", "maybe"):
        response = await confirm(client, tutor_headers, enroll_id, action)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ENROLLMENT_ACTION"


@pytest.mark.asyncio
async def test_cancel_own_request(client: AsyncClient, db_session, tutor_and_student):
    tutor_headers, student_id, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    response = await client.post(
        f"/api/v1/enrollments/{enroll_id}/cancel", headers=student_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "CANCELLED"

    enrollment = await db_session.get(Enrollment, UUID(enroll_id))
    assert enrollment.status == EnrollmentStatus.CANCELLED
    assert enrollment.modified_by == student_id


@pytest.mark.asyncio
async def test_cancelled_request_can_be_renewed(client: AsyncClient, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]
    await client.post(f"/api/v1/enrollments/{enroll_id}/cancel", headers=student_headers)

    response = await request_enrollment(client, student_headers, lecture_id)

    assert response.status_code == 201
    assert response.json()["enrollment_id"] != enroll_id


@pytest.mark.asyncio
async def test_cancel_by_other_member(client: AsyncClient, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]

    response = await client.post(
        f"/api/v1/enrollments/{enroll_id}/cancel", headers=tutor_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ENROLLMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_cancel_after_accept(client: AsyncClient, db_session, tutor_and_student):
    tutor_headers, _, student_headers = await tutor_and_student()
    lecture_id = await create_lecture(client, tutor_headers)
    enroll_id = (await request_enrollment(client, student_headers, lecture_id)).json()[
        "enrollment_id"
    ]
    await confirm(client, tutor_headers, enroll_id, "ACCEPTED")

    response = await client.post(
        f"/api/v1/enrollments/{enroll_id}/cancel", headers=student_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ENROLLMENT_NOT_FOUND"

    enrollment = await db_session.get(Enrollment, UUID(enroll_id))
    assert enrollment.status == EnrollmentStatus.ACCEPTED


@pytest.mark.asyncio
async def test_cancel_with_malformed_id(client: AsyncClient, tutor_and_student):
    _, _, student_headers = await tutor_and_student()

    response = await client.post(
        "/api/v1/enrollments/not-an-id/cancel", headers=student_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ENROLLMENT_ID"
