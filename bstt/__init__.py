"""
bstt – University of Bristol student timetable for the terminal and status bars.
"""
