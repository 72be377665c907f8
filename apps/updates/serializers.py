from rest_framework import serializers
from .models import SiteSettings


class SiteSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = SiteSettings
        fields = [
            'allow_registration',
            'site_name',
            'site_description',
            'maintenance_mode',
            'updated_at',
        ]
        read_only_fields = ['updated_at']


class UpdateManifestSerializer(serializers.Serializer):
    version = serializers.CharField()
    release_date = serializers.CharField(allow_null=True)
    description = serializers.CharField()
    download_url = serializers.CharField(allow_null=True)
    checksum = serializers.CharField(allow_blank=True)
    required = serializers.BooleanField()
    breaking_changes = serializers.BooleanField()


class VersionInfoSerializer(serializers.Serializer):
    current_version = serializers.CharField()
    latest_version = serializers.CharField()
    update_available = serializers.BooleanField()
    manifest = UpdateManifestSerializer(allow_null=True)


class ReleaseSerializer(serializers.Serializer):
    """Subset of a feed release record exposed to the admin panel."""

    tag_name = serializers.CharField()
    name = serializers.CharField(allow_null=True, required=False)
    body = serializers.CharField(allow_null=True, required=False)
    html_url = serializers.CharField(allow_null=True, required=False)
    published_at = serializers.CharField(allow_null=True, required=False)
    prerelease = serializers.BooleanField(required=False)
