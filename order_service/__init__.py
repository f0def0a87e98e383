"""
order_service — Strategy-based order processing.

Orders are assembled from line items, priced through an interchangeable
discount rule and then handed to pluggable payment, delivery and notification
strategies. All processing steps are simulated and reported through an
injected ActionReporter.
"""

__version__ = "0.1.0"
