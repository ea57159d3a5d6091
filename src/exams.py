# exams.py
#
# Authoritative GCSE exam table for the Summer 2025 series.
# Dates are ISO 8601 strings, listed per subject in the order published.
#
# EXAM_TIMES only needs entries for papers that do not start at the default
# morning slot (config.DEFAULT_EXAM_TIME). Keyed by (subject, iso_date).

ALL_SUBJECTS = [
    "Maths", "English Language", "English Literature", "Biology", "Chemistry", "Physics",
    "Geography", "History", "French", "Spanish",
    "Business", "Automotive", "Religious Studies", "Music",
    "Food Tech", "Health and Social", "IT", "Construction", "Statistics",
    "Sport", "Design Technology", "Media Studies", "Hospitality & Catering",
]


EXAM_DATES = {
    "Health and Social": ["2025-05-06"],
    "Construction": ["2025-05-06"],
    "Business": ["2025-05-09", "2025-05-16"],
    "English Literature": ["2025-05-12", "2025-05-20"],
    "Religious Studies": ["2025-05-13", "2025-05-21"],
    "Biology": ["2025-05-13", "2025-06-09"],
    "Geography": ["2025-05-14", "2025-06-06", "2025-06-12"],
    "Media Studies": ["2025-05-14", "2025-05-22"],
    "Maths": ["2025-05-15", "2025-06-04", "2025-06-11"],
    "History": ["2025-05-16", "2025-06-05", "2025-06-10"],
    "Chemistry": ["2025-05-19", "2025-06-13"],
    "French": ["2025-05-21", "2025-06-05"],
    "Physics": ["2025-05-22", "2025-06-16"],
    "Sport": ["2025-05-22"],
    "English Language": ["2025-05-23", "2025-06-06"],
    "Statistics": ["2025-06-02", "2025-06-13"],
    "Automotive": ["2025-06-02"],
    "IT": ["2025-06-09"],
    "Spanish": ["2025-06-10", "2025-06-17"],
    "Music": ["2025-06-05"],
    "Food Tech": ["2025-06-06"],
    "Design Technology": ["2025-06-18"],
    "Hospitality & Catering": ["2025-05-07"],
}


# No paper in this table has a confirmed non-default start yet.
EXAM_TIMES = {}
