from django.urls import path
from .views import (
    health,
    puzzle,
    check_solution,
    help_view,
    chat_message,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('puzzle', puzzle, name='puzzle'),
    path('solution', check_solution, name='check-solution'),
    path('help', help_view, name='help'),
    path('message', chat_message, name='chat-message'),
]
