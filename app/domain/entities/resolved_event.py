from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedEvent:
    appointment_id: str
    start_time: str
    end_time: str
    client_name: str
    coach_name: str
    cancelled: bool = False
    # which bounds were filled in because the payload had none
    start_synthesized: bool = False
    end_synthesized: bool = False
