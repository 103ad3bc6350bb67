"""Delivery app package.

Live list of upcoming bookings for the delivery team, fed by a document
store subscription.
"""
