"""Domain layer for barakainvest application.

Services are imported from their modules directly
(e.g. ``barakainvest.domain.account``) so that the database layer can import
``barakainvest.domain.entities`` without pulling the services in.
"""
