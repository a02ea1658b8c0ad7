"""Attendance Resolver package.

This package is organized by feature modules (workcalendar, leave, attendance,
resolution) around a pure status resolution engine, with a thin Flask
controller layer on top.
"""
