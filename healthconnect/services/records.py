from typing import Iterable, List


def normalize_conditions(conditions: Iterable[str] | None) -> List[str]:
	out = []
	for c in conditions or []:
		c = (c or "").strip()
		if c and c not in out:
			out.append(c)
	return out


def join_conditions(conditions: Iterable[str] | None) -> str:
	cleaned = normalize_conditions(conditions)
	if not cleaned:
		raise ValueError("Add at least one condition")
	return ", ".join(cleaned)
