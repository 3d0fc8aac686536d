from django.conf import settings
from rest_framework import serializers
from hostel.models import LeaveForm, Attendance, HostelInfo
from hostel.serializers.auth import StudentSummarySerializer


class LeaveFormSerializer(serializers.ModelSerializer):
    student_details = StudentSummarySerializer(source='student', read_only=True)
    file = serializers.FileField(write_only=True)
    file_url = serializers.SerializerMethodField()

    class Meta:
        model = LeaveForm
        fields = ['id', 'student', 'student_details', 'file', 'file_url', 'uploaded_at']
        read_only_fields = ['student', 'uploaded_at']

    def validate_file(self, value):
        max_bytes = settings.HOSTEL_LEAVE_FORM_MAX_BYTES
        if value.size > max_bytes:
            raise serializers.ValidationError(
                f'File size must be less than {max_bytes // (1024 * 1024)}MB'
            )
        content_type = getattr(value, 'content_type', None)
        if content_type not in settings.HOSTEL_LEAVE_FORM_CONTENT_TYPES:
            raise serializers.ValidationError('Please upload a PDF, PNG, or JPEG file only')
        return value

    def get_file_url(self, obj):
        if not obj.file:
            return None
        url = obj.file.url
        request = self.context.get('request')
        if request is not None and url.startswith('/'):
            return request.build_absolute_uri(url)
        return url


class AttendanceSerializer(serializers.ModelSerializer):
    student_details = StudentSummarySerializer(source='student', read_only=True)

    class Meta:
        model = Attendance
        fields = ['id', 'date', 'student', 'student_details', 'location', 'marked_by', 'created_at']
        read_only_fields = fields


class MarkAttendanceSerializer(serializers.Serializer):
    """Coordinates reported by the student's device"""
    latitude = serializers.FloatField(min_value=-90, max_value=90)
    longitude = serializers.FloatField(min_value=-180, max_value=180)


class WardenContactSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=20)
    position = serializers.CharField(max_length=100)


class HostelInfoSerializer(serializers.ModelSerializer):
    warden_contacts = WardenContactSerializer(many=True, required=False)

    class Meta:
        model = HostelInfo
        fields = ['id', 'date', 'mess_menu', 'notice', 'warden_contacts', 'created_at']
        read_only_fields = ['date', 'created_at']

    def validate_warden_contacts(self, value):
        return [dict(contact) for contact in value]
