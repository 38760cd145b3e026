"""Fixed vocabularies the generator draws from."""

QUERY_TYPES = ("TOP 20", "CARTE", "EXPOSÉES", "ANALYSE")

# Only this category carries a venue name.
DETAIL_CATEGORY = "CARTE"

PARIS_ZONES = (
    "Marais", "Montmartre", "Saint-Germain", "Bastille", "Oberkampf",
    "République", "Nation", "Belleville", "Pigalle", "Châtelet",
    "Opéra", "Batignolles", "Canal St-Martin", "Buttes-Chaumont",
)

TERRASSES = (
    "Le Perchoir Marais", "Café de Flore", "Les Deux Magots",
    "Brasserie Lipp", "Chez Janou", "Le Baron Rouge",
    "Café Charlot", "Le Progrès", "Rosa Bonheur", "Pavillon Puebla",
    "La Rotonde", "Terminus Nord", "L'Entrepôt", "Le Select",
)
