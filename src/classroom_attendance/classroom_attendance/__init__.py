"""Classroom Attendance package.

Organized by feature modules (classes, students, lessons, attendance, tokens,
checkin) with a thin Flask controller layer over service/repository layers.
"""
