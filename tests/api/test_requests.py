import pytest
from django.db import DatabaseError
from django.urls import reverse

from hostel.models import Complaint, OutpassRequest

OUTPASS_PAYLOAD = {
    'reason': 'Medical',
    'leave_time': '2024-01-10T09:00',
    'return_time': '2024-01-10T18:00',
}


@pytest.mark.django_db
@pytest.mark.lifecycle
class TestOutpassApi:

    def test_student_applies(self, student_client, test_user):
        response = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD)

        assert response.status_code == 201
        assert response.data['status'] == 'Pending'
        assert response.data['student'] == test_user.pk
        assert response.data['student_details']['room_no'] == '101'

    def test_client_status_is_ignored(self, student_client):
        payload = dict(OUTPASS_PAYLOAD, status='Approved')
        response = student_client.post(reverse('outpass-list'), payload)

        assert response.status_code == 201
        assert response.data['status'] == 'Pending'
        assert OutpassRequest.objects.get().status == 'Pending'

    def test_client_student_is_ignored(self, student_client, test_user, other_student):
        payload = dict(OUTPASS_PAYLOAD, student=other_student.pk)
        response = student_client.post(reverse('outpass-list'), payload)

        assert response.status_code == 201
        assert OutpassRequest.objects.get().student == test_user

    def test_reason_required(self, student_client):
        payload = dict(OUTPASS_PAYLOAD, reason='   ')
        response = student_client.post(reverse('outpass-list'), payload)
        assert response.status_code == 400

    def test_admin_cannot_apply(self, admin_api_client):
        response = admin_api_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD)
        assert response.status_code == 403

    def test_window_not_enforced_by_default(self, student_client):
        payload = dict(OUTPASS_PAYLOAD, leave_time='2024-01-10T18:00', return_time='2024-01-10T09:00')
        response = student_client.post(reverse('outpass-list'), payload)
        assert response.status_code == 201

    def test_window_enforced_when_enabled(self, student_client, settings):
        settings.HOSTEL_ENFORCE_OUTPASS_WINDOW = True
        payload = dict(OUTPASS_PAYLOAD, leave_time='2024-01-10T18:00', return_time='2024-01-10T09:00')

        response = student_client.post(reverse('outpass-list'), payload)

        assert response.status_code == 400
        assert 'return_time' in response.data

    def test_students_see_only_their_own(self, student_client, api_client, other_student):
        student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD)
        OutpassRequest.objects.create(
            student=other_student, reason='Wedding',
            leave_time='2024-01-11T09:00Z', return_time='2024-01-12T09:00Z'
        )

        response = student_client.get(reverse('outpass-list'))

        assert response.status_code == 200
        assert len(response.data) == 1
        assert response.data[0]['reason'] == 'Medical'

    def test_admin_sees_all_with_student_details(self, admin_api_client, test_user, other_student):
        for student in (test_user, other_student):
            OutpassRequest.objects.create(
                student=student, reason='Trip',
                leave_time='2024-01-11T09:00Z', return_time='2024-01-12T09:00Z'
            )

        response = admin_api_client.get(reverse('outpass-list'))

        assert response.status_code == 200
        assert len(response.data) == 2
        usernames = {row['student_details']['username'] for row in response.data}
        assert usernames == {'student1', 'student2'}

    def test_filter_by_status(self, admin_api_client, test_user):
        OutpassRequest.objects.create(
            student=test_user, reason='A', status='Approved',
            leave_time='2024-01-11T09:00Z', return_time='2024-01-12T09:00Z'
        )
        OutpassRequest.objects.create(
            student=test_user, reason='B',
            leave_time='2024-01-11T09:00Z', return_time='2024-01-12T09:00Z'
        )

        response = admin_api_client.get(reverse('outpass-list'), {'status': 'Pending'})

        assert [row['reason'] for row in response.data] == ['B']

    def test_student_cannot_read_others_request(self, student_client, other_student):
        outpass = OutpassRequest.objects.create(
            student=other_student, reason='Private',
            leave_time='2024-01-11T09:00Z', return_time='2024-01-12T09:00Z'
        )
        response = student_client.get(reverse('outpass-detail', args=[outpass.pk]))
        assert response.status_code == 404

    def test_no_update_or_delete(self, student_client):
        created = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD).data
        url = reverse('outpass-detail', args=[created['id']])

        assert student_client.patch(url, {'status': 'Approved'}).status_code == 405
        assert student_client.delete(url).status_code == 405

    def test_full_scenario(self, student_client, admin_api_client):
        created = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD).data
        assert created['status'] == 'Pending'

        response = admin_api_client.post(reverse('outpass-approve', args=[created['id']]))
        assert response.status_code == 200
        assert response.data['status'] == 'Approved'
        assert response.data['reason'] == 'Medical'

        response = student_client.post(
            reverse('outpass-status', args=[created['id']]), {'status': 'Rejected'}
        )
        assert response.status_code == 403
        assert OutpassRequest.objects.get(pk=created['id']).status == 'Approved'

    def test_reject_then_approve_conflicts(self, student_client, admin_api_client):
        created = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD).data

        assert admin_api_client.post(reverse('outpass-reject', args=[created['id']])).status_code == 200
        response = admin_api_client.post(reverse('outpass-approve', args=[created['id']]))

        assert response.status_code == 409
        assert 'detail' in response.data
        assert OutpassRequest.objects.get(pk=created['id']).status == 'Rejected'

    def test_status_endpoint_rejects_unknown_value(self, student_client, admin_api_client):
        created = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD).data
        response = admin_api_client.post(
            reverse('outpass-status', args=[created['id']]), {'status': 'Cancelled'}
        )
        assert response.status_code == 409

    def test_status_endpoint_requires_status(self, student_client, admin_api_client):
        created = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD).data
        response = admin_api_client.post(reverse('outpass-status', args=[created['id']]), {})
        assert response.status_code == 400

    def test_transition_missing_request(self, admin_api_client):
        response = admin_api_client.post(reverse('outpass-approve', args=[424242]))
        assert response.status_code == 404

    def test_transition_non_numeric_id(self, admin_api_client):
        assert admin_api_client.post('/api/outpasses/abc/approve/').status_code == 404
        assert admin_api_client.post('/api/outpasses/abc/status/', {'status': 'Approved'}).status_code == 404
        assert admin_api_client.get('/api/outpasses/abc/').status_code == 404

    def test_store_failure_on_apply(self, student_client, monkeypatch):
        def failing_create(self, **kwargs):
            raise DatabaseError('connection lost')

        monkeypatch.setattr('django.db.models.query.QuerySet.create', failing_create)
        response = student_client.post(reverse('outpass-list'), OUTPASS_PAYLOAD)
        monkeypatch.undo()

        assert response.status_code == 409
        assert 'detail' in response.data
        assert not OutpassRequest.objects.exists()

    def test_unauthenticated(self, api_client):
        assert api_client.get(reverse('outpass-list')).status_code == 403


@pytest.mark.django_db
@pytest.mark.lifecycle
class TestComplaintApi:

    def test_student_files_complaint(self, student_client):
        response = student_client.post(
            reverse('complaint-list'), {'complaint_text': 'No hot water', 'status': 'Resolved'}
        )

        assert response.status_code == 201
        assert response.data['status'] == 'Open'

    def test_empty_complaint(self, student_client):
        response = student_client.post(reverse('complaint-list'), {'complaint_text': ''})
        assert response.status_code == 400

    def test_resolve_and_reopen(self, student_client, admin_api_client):
        created = student_client.post(reverse('complaint-list'), {'complaint_text': 'Broken window'}).data
        url = reverse('complaint-status', args=[created['id']])

        response = admin_api_client.post(url, {'status': 'Resolved'})
        assert response.status_code == 200
        assert response.data['status'] == 'Resolved'

        response = admin_api_client.post(url, {'status': 'Open'})
        assert response.status_code == 200
        assert response.data['status'] == 'Open'

        listed = student_client.get(reverse('complaint-list')).data
        assert listed[0]['status'] == 'Open'

    def test_in_progress(self, student_client, admin_api_client):
        created = student_client.post(reverse('complaint-list'), {'complaint_text': 'Wifi down'}).data
        response = admin_api_client.post(
            reverse('complaint-status', args=[created['id']]), {'status': 'In Progress'}
        )
        assert response.data['status'] == 'In Progress'

    def test_student_cannot_change_status(self, student_client):
        created = student_client.post(reverse('complaint-list'), {'complaint_text': 'Wifi down'}).data
        response = student_client.post(
            reverse('complaint-status', args=[created['id']]), {'status': 'Resolved'}
        )

        assert response.status_code == 403
        assert Complaint.objects.get(pk=created['id']).status == 'Open'

    def test_complaints_have_no_approve_shortcut(self, student_client, admin_api_client):
        created = student_client.post(reverse('complaint-list'), {'complaint_text': 'Wifi down'}).data
        response = admin_api_client.post(f"/api/complaints/{created['id']}/approve/")
        assert response.status_code == 404

    def test_status_non_numeric_id(self, admin_api_client):
        response = admin_api_client.post('/api/complaints/abc/status/', {'status': 'Resolved'})
        assert response.status_code == 404
