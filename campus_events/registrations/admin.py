from django.contrib import admin

from .models import Registration


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["event", "student", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["event__name", "student__name", "student__email"]
    raw_id_fields = ["event", "student"]
