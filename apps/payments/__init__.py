"""Payments app package.

Only the payment provider webhook lives here, and it is disabled: every
call is answered with "Stripe not configured".
"""
