"""Products app package.

The rental catalog: seabobs, jetskis and services with their daily and
hourly prices and the commission percentage paid to partners.
"""
