from drf_spectacular.contrib.rest_framework_simplejwt import SimpleJWTScheme


class CampusJWTScheme(SimpleJWTScheme):
    target_class = "campus_events.users.authentication.CampusJWTAuthentication"
