from .schemas import StatusSnapshot


def health_report(service_name: str) -> dict:
    """Liveness payload; no timestamps so repeated calls are identical"""
    return {
        "status": "healthy",
        "service": service_name,
    }


def status_snapshot() -> StatusSnapshot:
    return StatusSnapshot(
        qubits_available=256,
        queue_length=3,
        uptime_text="99.9%",
        active_jobs=12,
    )
