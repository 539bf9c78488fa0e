"""
Service layer: merge engine and listing projector
"""
