"""Static protocol data: food lists, aliases and meal policy rows."""
