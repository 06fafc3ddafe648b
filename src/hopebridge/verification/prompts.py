"""
文档校验使用的固定指令与兜底结论
"""

from hopebridge.domain import VerificationOutcome

VERIFICATION_PROMPT = (
    "Analyze this image. Is it a valid academic marks memo, certificate, or transcript? "
    "Check for signs of tampering or fake formatting. "
    "Return ONLY a JSON object with keys: 'isValid' (boolean) and 'reason' (string)."
)

SIMULATION_REASON = "Simulation: Document structure matches academic record patterns."
FALLBACK_REASON = "AI Service unavailable, manual review pending. (Fallback)"

SIMULATED_OUTCOME = VerificationOutcome(is_valid=True, reason=SIMULATION_REASON)
FALLBACK_OUTCOME = VerificationOutcome(is_valid=True, reason=FALLBACK_REASON)
