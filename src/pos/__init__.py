"""POS back-office core: authentication and transactional persistence."""
