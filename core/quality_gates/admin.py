from django.contrib import admin
from .models import QualityGate, QualityGateCondition


class QualityGateConditionInline(admin.TabularInline):
    model = QualityGateCondition
    extra = 0
    fields = ['metric_key', 'operator', 'warning_threshold', 'error_threshold', 'period']


@admin.register(QualityGate)
class QualityGateAdmin(admin.ModelAdmin):
    list_display = ['name', 'is_default', 'created_at']
    list_filter = ['is_default']
    search_fields = ['name']
    inlines = [QualityGateConditionInline]
