"""Bookings app package.

Bookings are document-shaped: line items are stored as a JSON list next to
the client, delivery and payment details, so that the delivery feed can
read them through the document store exactly as they were written.
"""
