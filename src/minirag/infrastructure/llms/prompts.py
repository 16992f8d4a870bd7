# src/minirag/infrastructure/llms/prompts.py


def build_prompt(question: str, context: str) -> str:
    return (
        f"Context: {context}\n\n"
        f"Human: {question}\n\n"
        "Assistant: Based on the given context, I will provide a concise and "
        "accurate answer to the question."
    )
