"""
Serializers for the activation key server group endpoints.
"""

from rest_framework import serializers


class ServerGroupSelectionRequestSerializer(serializers.Serializer):
    """Serializer for remove/add server groups requests."""

    server_group_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=True, min_length=1
    )


class ActivationKeyDTOSerializer(serializers.Serializer):
    """Serializer for ActivationKeyDTO."""

    id = serializers.IntegerField()
    key = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    usage_limit = serializers.IntegerField(allow_null=True)
    disabled = serializers.BooleanField()


class ServerGroupRowDTOSerializer(serializers.Serializer):
    """Serializer for ServerGroupRowDTO."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    can_access = serializers.BooleanField()


class ServerGroupListResponseSerializer(serializers.Serializer):
    """Serializer for a server group list of an activation key."""

    activation_key = ActivationKeyDTOSerializer()
    server_groups = ServerGroupRowDTOSerializer(many=True)


class GroupChangeResponseSerializer(serializers.Serializer):
    """Serializer for the result of removing or adding server groups."""

    activation_key_id = serializers.IntegerField()
    count = serializers.IntegerField()
    server_group_ids = serializers.ListField(child=serializers.IntegerField())
    message = serializers.CharField()
