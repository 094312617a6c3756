"""Serializers for checking drafts and rendering hub snapshots.

The draft serializer is the single place where draft input rules live.
The others turn domain snapshots into primitives for the presentation
layer.
"""

from rest_framework import serializers

from eventhub.domain.calendar import canonical_timezone


class EventDraftSerializer(serializers.Serializer):
    """Input rules for turning a draft into event fields.

    Naive date input is read as wall-clock time in the canonical zone.
    """

    title = serializers.CharField(trim_whitespace=True)
    description = serializers.CharField(trim_whitespace=True)
    date = serializers.DateTimeField()
    location = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=""
    )

    def __init__(self, *args, time_zone=None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.fields["date"].timezone = time_zone or canonical_timezone()

    def validate_location(self, value: str | None) -> str | None:
        value = (value or "").strip()
        return value or None


class UserProfileSerializer(serializers.Serializer):
    """Serializer for UserProfile domain model."""

    uid = serializers.CharField()
    email = serializers.CharField()
    display_name = serializers.CharField()
    role = serializers.CharField(source="role.value")


class SessionStateSerializer(serializers.Serializer):
    """Serializer for SessionState domain model."""

    user = UserProfileSerializer(allow_null=True)
    mode = serializers.CharField(source="mode.value")
    busy = serializers.BooleanField()
    error = serializers.CharField(allow_null=True)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField(allow_null=True)


class ViewModelSerializer(serializers.Serializer):
    """Serializer for the presentation view-model."""

    user_label = serializers.CharField(allow_null=True)
    can_toggle_mode = serializers.BooleanField()
    mode_button_label = serializers.CharField(allow_null=True)
    auth_button_label = serializers.CharField()
    controls_disabled = serializers.BooleanField()
    can_add_event = serializers.BooleanField()
    composer_open = serializers.BooleanField()
    submit_button_label = serializers.CharField()
    heading = serializers.CharField()
    events = EventSerializer(many=True)
    empty_message = serializers.CharField(allow_null=True)
    error = serializers.CharField(allow_null=True)
