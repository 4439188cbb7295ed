"""Exit codes and storage keys for the onboarding wizard."""

ONBOARDING_SUCCESS = 0  # Recap confirmed
ONBOARDING_QUIT = 1  # User cancelled (Ctrl+C)
ONBOARDING_STORAGE_ERROR = 2  # Redis unreachable or failing (persistent mode)
ONBOARDING_CONFIG_ERROR = 3  # Invalid settings (unknown mode or locale)

MODE_EPHEMERAL = "ephemeral"
MODE_PERSISTENT = "persistent"
MODES = (MODE_EPHEMERAL, MODE_PERSISTENT)

# Redis keys, one per collected answer
KEY_USER_NAME = "user_name"
KEY_COMPANY_NAME = "company_name"
KEY_EMPLOYEE_COUNT = "employee_count"
KEY_EMPLOYEE_NAMES = "employee_names"
KEY_TRUCK_COUNT = "truck_count"
KEY_TRUCK_VOLUMES = "truck_volumes"
KEY_TRUCK_TYPE = "truck_type"
