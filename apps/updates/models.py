from django.db import models


class SiteSettings(models.Model):
    """
    Site-wide switches edited from the admin settings panel.

    Single row (pk=1); use ``SiteSettings.load()`` rather than querying.
    """

    allow_registration = models.BooleanField(default=True)
    site_name = models.CharField(max_length=100, default='Finance Manager')
    site_description = models.CharField(max_length=255, default='Aplikasi pengelola keuangan', blank=True)
    maintenance_mode = models.BooleanField(default=False)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'site_settings'
        verbose_name = 'site settings'
        verbose_name_plural = 'site settings'

    def __str__(self):
        return self.site_name

    def save(self, *args, **kwargs):
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> 'SiteSettings':
        obj, _ = cls.objects.get_or_create(pk=1)
        return obj
