"""Users, profiles, posts and member types with referential-integrity upkeep."""
