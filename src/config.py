from datetime import date

# --- REVISION HORIZON ---

# Whole calendar the planner fills (inclusive on both ends)
START_DATE = date(2025, 4, 4)
END_DATE = date(2025, 7, 19)

# Days strictly before this date rotate evenly through every subject.
# From this date onwards the subject with the nearest exam goes first.
EARLY_PHASE_END = date(2025, 4, 21)

# --- SESSIONS ---

DEFAULT_EXAM_TIME = "09:00"
SESSION_HOURS = 1

REINFORCEMENT = "reinforcement"
ROTATION = "rotation"
FOCUSED = "focused"
CATEGORIES = (REINFORCEMENT, ROTATION, FOCUSED)

# Display colours (calendar grid + legend)
EXAM_COLOR = "#FF5733"
CATEGORY_COLORS = {
    REINFORCEMENT: "#1E40AF",
    ROTATION: "#3B82F6",
    FOCUSED: "#60A5FA",
}

# --- EXPORT ---

ICS_FILENAME = "gcse_revision_schedule.ics"

# Wall-clock zone of every slot label
TIMEZONE = "Europe/London"

# --- INSPECTOR ---

GROQ_MODEL = "openai/gpt-oss-20b"
GROQ_TEMPERATURE = 0.1
