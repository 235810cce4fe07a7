"""Views for the forum project."""

from django.db import connection
from django.http import HttpResponse
from django.views import View


class HealthcheckView(View):
    """Handle health check requests."""

    def get(self, request):
        """
        Return health check status.

        Provides an unauthenticated health check page, returning 'ok' if Django is up and running
        and can access the backend database, 'nok' otherwise.
        """
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            one = cursor.fetchone()[0]
            if one == 1:
                return HttpResponse("ok")
        return HttpResponse("nok")
