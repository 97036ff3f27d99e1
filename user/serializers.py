from rest_framework import serializers

from .models import User


class UserDetailsSerializer(serializers.ModelSerializer):
    """
    Serializer for the current user, used by dj-rest-auth's user details endpoint.
    """
    fullname = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ('pk', 'username', 'email', 'first_name', 'last_name', 'fullname', 'role')
        read_only_fields = ('pk', 'username', 'role')

    def get_fullname(self, obj):
        return f"{obj.first_name} {obj.last_name}".strip() or obj.username
