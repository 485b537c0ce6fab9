"""Service layer — drives the Optional container from plain inputs.

INVARIANT: All service-layer methods return ServiceResult.
"""
