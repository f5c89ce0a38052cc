from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(url='/admin/', permanent=False), name='home'),
    path('favicon.ico', lambda request: HttpResponse(status=204), name='favicon'),
    path('admin/', admin.site.urls),
    path('api/accounts/', include('accounts.urls')),
    # same endpoints under /api/auth/ for the login and signup screens
    path('api/auth/', include('accounts.urls')),
    path('api/academics/', include('academics.urls')),
    path('api/reporting/', include('reporting.urls')),
]
