"""Timekeeping package.

Organized by feature modules (bookings, dayplans, calculation, daily, ...):
pure calculation code, repository protocols with MySQL adapters, and a thin
Flask controller that triggers the daily calculation.
"""
