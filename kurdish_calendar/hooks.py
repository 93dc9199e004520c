app_name = "kurdish_calendar"
app_title = "Kurdish Calendar"
app_publisher = "Kurdish Calendar Contributors"
app_description = "Kurdish (Rojhalat and Bashur) and Jalali calendar conversion for Frappe sites."
app_email = "support@example.com"
app_license = "MIT"

# Boot
boot_session = "kurdish_calendar.boot.boot_session"

# Fixtures / Data
fixtures = []
