"""
Service layer abstraction.

Services hold the business rules.  They receive their collaborators
(the person store) explicitly instead of reaching for module globals.
"""
