"""Document summary assistant: upload -> text extraction -> generative summary with extractive fallback."""
