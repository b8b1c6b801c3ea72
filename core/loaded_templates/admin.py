from django.contrib import admin
from .models import LoadedTemplate


@admin.register(LoadedTemplate)
class LoadedTemplateAdmin(admin.ModelAdmin):
    list_display = ['template_type', 'key', 'created_at']
    list_filter = ['template_type']
    readonly_fields = ['template_type', 'key', 'created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
