"""Admin configuration for localization app."""

from django.contrib import admin, messages
from django.http import HttpResponse

from .models import ForumSettings, Language, LocaleResourceKey, LocaleStringResource
from .services import LocalizationService
from .utils import clear_resource_cache


class LocaleStringResourceInline(admin.TabularInline):
    """Values of one resource key, one row per language."""

    model = LocaleStringResource
    fields = ["language", "resource_value"]
    readonly_fields = ["language"]
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        # Rows are seeded when languages and keys are created
        return False


@admin.register(Language)
class LanguageAdmin(admin.ModelAdmin):
    """Admin interface for Language model."""

    list_display = ["name", "language_culture", "right_to_left", "is_default", "created_at"]
    search_fields = ["name", "language_culture"]
    ordering = ["name"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["export_csv_action"]

    def is_default(self, obj):
        """Show whether this is the default language."""
        default_language = ForumSettings.objects.values_list("default_language_id", flat=True).first()
        return obj.pk == default_language

    is_default.boolean = True
    is_default.short_description = "Default"

    def has_delete_permission(self, request, obj=None):
        """The default language cannot be deleted."""
        if obj is not None and self.is_default(obj):
            return False
        return super().has_delete_permission(request, obj)

    def save_model(self, request, obj, form, change):
        """Create new languages through the service so their values get seeded."""
        service = LocalizationService()
        if change:
            service.save_language(obj).unwrap()
        else:
            service.add_language(obj).unwrap()

    def delete_model(self, request, obj):
        """Delete through the service so the default language is protected."""
        result = LocalizationService().delete_language(obj)
        if not result.ok:
            self.message_user(request, result.message, messages.ERROR)

    def delete_queryset(self, request, queryset):
        """Delete each language through the service."""
        service = LocalizationService()
        for language in queryset:
            result = service.delete_language(language)
            if not result.ok:
                self.message_user(request, result.message, messages.ERROR)

    def export_csv_action(self, request, queryset):
        """Download the selected language as CSV."""
        if queryset.count() != 1:
            self.message_user(request, "Select exactly one language to export.", messages.WARNING)
            return None

        language = queryset.first()
        response = HttpResponse(LocalizationService().export_csv(language), content_type="text/csv")
        response["Content-Disposition"] = f'attachment; filename="{language.language_culture}.csv"'
        return response

    export_csv_action.short_description = "Export selected language as CSV"


@admin.register(LocaleResourceKey)
class LocaleResourceKeyAdmin(admin.ModelAdmin):
    """Admin interface for LocaleResourceKey model."""

    list_display = ["name", "notes_preview", "date_added"]
    search_fields = ["name", "notes"]
    ordering = ["name"]
    readonly_fields = ["date_added"]
    inlines = [LocaleStringResourceInline]

    def notes_preview(self, obj):
        """Show a preview of the notes."""
        if obj.notes:
            preview = obj.notes[:50]
            if len(obj.notes) > 50:
                preview += "..."
            return preview
        return "-"

    notes_preview.short_description = "Notes"

    def save_model(self, request, obj, form, change):
        """Create new keys through the service so their values get seeded."""
        service = LocalizationService()
        if change:
            service.update_resource_key(obj.pk, obj.name).unwrap()
            LocaleResourceKey.objects.filter(pk=obj.pk).update(notes=obj.notes)
        else:
            service.add_resource_key(obj).unwrap()

    def save_formset(self, request, form, formset, change):
        """Save edited values and drop their cached copies."""
        super().save_formset(request, form, formset, change)
        clear_resource_cache([form.instance.name], Language.objects.values_list("pk", flat=True))

    def delete_model(self, request, obj):
        """Delete the key and its values in every language."""
        result = LocalizationService().delete_resource_key(obj)
        if not result.ok:
            self.message_user(request, result.message, messages.ERROR)

    def delete_queryset(self, request, queryset):
        """Delete each key through the service."""
        service = LocalizationService()
        for resource_key in queryset:
            result = service.delete_resource_key(resource_key)
            if not result.ok:
                self.message_user(request, result.message, messages.ERROR)


@admin.register(ForumSettings)
class ForumSettingsAdmin(admin.ModelAdmin):
    """Admin interface for the forum settings row."""

    list_display = ["__str__", "default_language", "updated_at"]

    def has_add_permission(self, request):
        return not ForumSettings.objects.exists()
