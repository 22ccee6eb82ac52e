"""Bundled sample data for the film store."""

FILMS: list[dict] = [
    {
        "title": "Inception",
        "year": 2010,
        "director": "Christopher Nolan",
        "actors": ["Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page"],
    },
    {
        "title": "The Dark Knight",
        "year": 2008,
        "director": "Christopher Nolan",
        "actors": ["Christian Bale", "Heath Ledger", "Aaron Eckhart"],
    },
    {
        "title": "Interstellar",
        "year": 2014,
        "director": "Christopher Nolan",
        "actors": ["Matthew McConaughey", "Anne Hathaway", "Jessica Chastain"],
    },
    {
        "title": "Pulp Fiction",
        "year": 1994,
        "director": "Quentin Tarantino",
        "actors": ["John Travolta", "Uma Thurman", "Samuel L. Jackson"],
    },
    {
        "title": "The Matrix",
        "year": 1999,
        "director": "Lana Wachowski",
        "actors": ["Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss"],
    },
    {
        "title": "Parasite",
        "year": 2019,
        "director": "Bong Joon-ho",
        "actors": ["Song Kang-ho", "Lee Sun-kyun", "Cho Yeo-jeong"],
    },
]

# Not rendered by any view.
ACTOR_SALARIES: dict[str, float] = {
    "Leonardo DiCaprio": 20_000_000,
    "Joseph Gordon-Levitt": 2_500_000,
    "Christian Bale": 10_000_000,
    "Heath Ledger": 4_000_000,
    "Matthew McConaughey": 15_000_000,
    "Anne Hathaway": 5_000_000,
    "John Travolta": 150_000,
    "Uma Thurman": 100_000,
    "Keanu Reeves": 10_000_000,
    "Song Kang-ho": 1_000_000,
}
