from application.orchestrator import FetchOrchestrator

__all__ = ["FetchOrchestrator"]
