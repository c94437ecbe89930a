"""Test-specific configuration for the club intake tests"""

# Test configuration dictionary
test_config = {
    "database_url": "sqlite://",
    "log_level": "INFO",
    "environment": "test",
    "admin_secret_code": "test-admin-secret",
    "cron_secret": "test-cron-secret",
    "mailgun_api_key": "test-mailgun-key",
    "mailgun_domain": "mg.example.com",
    "sender_email": "club@mg.example.com",
    "board_email": "board@example.com",
    "club_name": "VinnovateIT",
}
