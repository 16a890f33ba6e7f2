YOPAY = 'Yo! Payments'

__version__ = '0.1.0'
