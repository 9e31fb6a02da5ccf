from django.contrib import admin

from .models import Word


@admin.register(Word)
class WordAdmin(admin.ModelAdmin):
    list_display = ("text", "length", "created_at")
    list_filter = ("length",)
    search_fields = ("text",)
    ordering = ("length", "text")
