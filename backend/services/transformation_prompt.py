TRANSFORMATION_PROMPT_TEMPLATE = (
    "Transform this person's physique based on this fitness goal: {description}. \n"
    "Create a realistic, natural-looking transformation showing them with this physique. \n"
    "Maintain their facial features, skin tone, and overall appearance but modify their body composition, \n"
    "muscle definition, and physique as described. The result should look like a real photograph, \n"
    "not artificial or overly edited. Keep the same pose, background, and clothing style."
)

def build_transformation_prompt(description: str) -> str:
    """Interpolate the user's fitness goal into the fixed transformation prompt"""
    return TRANSFORMATION_PROMPT_TEMPLATE.format(description=description)
