from rest_framework import serializers

from campus_events.users.models import User

MIN_PASSWORD_LENGTH = 6


class UserSerializer(serializers.ModelSerializer[User]):
    id = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "name", "role"]
        read_only_fields = fields


class OrganizerSerializer(serializers.ModelSerializer[User]):
    id = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        min_length=MIN_PASSWORD_LENGTH,
        error_messages={
            "min_length": "Password must be at least 6 characters long",
        },
    )
    name = serializers.CharField(max_length=255)
    # Role is validated by the service so the error text stays the same
    # for every rejected value.
    role = serializers.CharField()


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    role = serializers.ChoiceField(choices=User.Role.choices)


class AuthResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = UserSerializer()
