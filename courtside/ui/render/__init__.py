"""Frame rendering. Every function returns Rich ``Text`` lines; nothing here touches Textual."""
