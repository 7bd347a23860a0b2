"""Model fallback prompt: UI component names from free text, JSON array only."""
EXTRACTION_TEMPLATE = """Analyze the following text and extract UI component names mentioned in it.
UI components are things like: button, modal, dialog, bottom sheet, label, input, dropdown, card, list, table, etc.
Return ONLY a JSON array of component names found, nothing else. If no components found, return [].
Example output: ["bottom sheet", "label value", "button"]

Text to analyze: "{text}"

JSON array:"""
