"""URL paths of the application views the page objects cover."""

LOGIN = "/login"
DASHBOARD = "/dashboard"
PROFILE = "/profile"
SETTINGS = "/settings"
SIGNUP = "/signup"
FORGOT_PASSWORD = "/forgot-password"
