"""
examslots/config.py
===================
Weekday alphabet, exam slot layout and the evening cutoff.
"""

def get_active_config():
    config = {
        # 'R' for ThuRsday
        "weekday_codes": ["M", "T", "W", "R", "F", "S"],

        # days that get regular daytime exam slots
        "exam_days": ["M", "T", "W", "R", "F"],

        # 3 daytime slots per exam day
        "regular_slots": ["_d1", "_d2", "_d3"],

        # one evening slot per weekday, Saturday included
        "evening_suffix": "_e",

        # single-day classes starting at or after this are evening classes
        "evening_cutoff": "05:30PM",

        "saturday_code": "S",

        "default_input": "classTimes.dat",
    }
    return config
