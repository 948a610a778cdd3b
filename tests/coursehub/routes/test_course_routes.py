def test_create_course_returns_created_row(client, instructor, auth_headers) -> None:
    response = client.post(
        '/api/courses',
        json={'title': 'Operating Systems', 'description': 'Processes and threads', 'instructor_id': instructor['id']},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body['message'] == 'Course added successfully'
    assert body['course']['title'] == 'Operating Systems'
    assert body['course']['description'] == 'Processes and threads'
    assert body['course']['instructor_id'] == instructor['id']
    assert isinstance(body['course']['id'], int)


def test_create_course_description_is_optional(client, instructor, auth_headers) -> None:
    response = client.post(
        '/api/courses',
        json={'title': 'Networks', 'instructor_id': instructor['id']},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()['course']['description'] is None


def test_create_course_requires_title_and_instructor(client, auth_headers) -> None:
    response = client.post('/api/courses', json={'description': 'No title'}, headers=auth_headers)

    assert response.status_code == 400


def test_create_course_rejects_unknown_instructor(client, auth_headers) -> None:
    response = client.post('/api/courses', json={'title': 'Ghost', 'instructor_id': 999}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()['detail'] == 'Instructor not found'


def test_update_course_with_description_only_keeps_title(client, course, auth_headers) -> None:
    response = client.put(
        f"/api/courses/{course['id']}",
        json={'description': 'Now with joins'},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body['message'] == 'Course updated successfully'
    assert body['course']['title'] == 'Databases 101'
    assert body['course']['description'] == 'Now with joins'


def test_update_course_with_title_only_keeps_description(client, course, auth_headers) -> None:
    response = client.put(f"/api/courses/{course['id']}", json={'title': 'Databases 201'}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()['course']['title'] == 'Databases 201'
    assert response.json()['course']['description'] == 'Relational basics'


def test_update_course_requires_at_least_one_field(client, course, auth_headers) -> None:
    response = client.put(f"/api/courses/{course['id']}", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()['detail'] == 'At least one field (title or description) must be provided.'


def test_update_course_returns_not_found_for_unknown_id(client, auth_headers) -> None:
    response = client.put('/api/courses/999', json={'title': 'Nothing'}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()['detail'] == 'Course not found'


def test_delete_course_returns_message_only(client, course, auth_headers) -> None:
    response = client.delete(f"/api/courses/{course['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {'message': 'Course deleted successfully'}


def test_delete_course_returns_not_found_for_unknown_id(client, auth_headers) -> None:
    response = client.delete('/api/courses/999', headers=auth_headers)

    assert response.status_code == 404


def test_delete_course_requires_token(client, course) -> None:
    response = client.delete(f"/api/courses/{course['id']}")

    assert response.status_code == 401


def test_list_instructor_courses_is_public(client, course, instructor) -> None:
    response = client.get(f"/api/courses/{instructor['id']}")

    assert response.status_code == 200
    assert [item['id'] for item in response.json()['courses']] == [course['id']]


def test_list_instructor_courses_returns_empty_list_when_none(client, instructor) -> None:
    response = client.get(f"/api/courses/{instructor['id']}")

    assert response.status_code == 200
    assert response.json() == {'courses': []}


def test_list_instructor_courses_returns_not_found_for_unknown_instructor(client) -> None:
    response = client.get('/api/courses/999')

    assert response.status_code == 404


def test_course_lifecycle_create_update_delete(client, instructor, auth_headers) -> None:
    created = client.post(
        '/api/courses',
        json={'title': 'Draft', 'instructor_id': instructor['id']},
        headers=auth_headers,
    ).json()['course']

    updated = client.put(f"/api/courses/{created['id']}", json={'title': 'Final'}, headers=auth_headers)
    assert updated.json()['course']['title'] == 'Final'

    listed = client.get(f"/api/courses/{instructor['id']}").json()['courses']
    assert [item['title'] for item in listed] == ['Final']

    client.delete(f"/api/courses/{created['id']}", headers=auth_headers)

    listed_after_delete = client.get(f"/api/courses/{instructor['id']}").json()['courses']
    assert created['id'] not in [item['id'] for item in listed_after_delete]


def test_non_numeric_course_id_is_a_bad_request(client, auth_headers) -> None:
    response = client.put('/api/courses/abc', json={'title': 'Nope'}, headers=auth_headers)

    assert response.status_code == 400


def test_delete_course_removes_its_enrollments_and_reviews(client, course, instructor, student, auth_headers) -> None:
    client.post('/api/enrollments', json={'courseId': course['id'], 'userId': student['id']}, headers=auth_headers)
    client.post(f"/api/courses/{course['id']}/reviews", json={'rating': 4, 'userId': student['id']})

    client.delete(f"/api/courses/{course['id']}", headers=auth_headers)
    replacement = client.post(
        '/api/courses',
        json={'title': 'Brand new', 'instructor_id': instructor['id']},
        headers=auth_headers,
    ).json()['course']

    assert client.get(f"/api/enrollments/{student['id']}").json() == {'enrolledCourses': []}
    assert client.get(f"/api/courses/{replacement['id']}/reviews").json() == {'reviews': []}
