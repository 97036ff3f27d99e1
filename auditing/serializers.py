from rest_framework import serializers

from .models import ActivityLog


class ActivityLogSerializer(serializers.ModelSerializer):
    username = serializers.SerializerMethodField()

    class Meta:
        model = ActivityLog
        fields = ['id', 'timestamp', 'user', 'username', 'user_role', 'action', 'details', 'metadata']
        read_only_fields = fields

    def get_username(self, obj):
        return obj.user.username if obj.user else 'System'
