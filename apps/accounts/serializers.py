from rest_framework import serializers


class AccessCodeSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64, trim_whitespace=True)


class LoginSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64, trim_whitespace=True)
    chef = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class CodeResolutionSerializer(serializers.Serializer):
    role = serializers.CharField()
    restaurant = serializers.CharField(allow_null=True)
    chefs = serializers.ListField(child=serializers.CharField())


class IdentitySerializer(serializers.Serializer):
    """Output shape of a signed-in identity."""
    role = serializers.CharField()
    restaurant = serializers.CharField(allow_null=True)
    chef = serializers.CharField(allow_blank=True)


class LoginResponseSerializer(serializers.Serializer):
    access = serializers.CharField()
    identity = IdentitySerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
