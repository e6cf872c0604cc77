"""
Seed catalog loaded into the repository at startup.

Ids are not part of the seed: every startup generates fresh ones.
"""

from typing import List

from movie_catalog.features.schemas import Movie, new_movie

# (isbn, title, overview, director first name, director last name)
SEED_MOVIES = [
    (
        "531306",
        "Rim of the World",
        "Stranded at a summer camp when aliens attack the planet, four teens with nothing in "
        "common embark on a perilous mission to save the world.",
        "Joseph",
        "McGinty Nichol",
    ),
    (
        "181808",
        "Star Wars: The Last Jedi",
        "Rey develops her newly discovered abilities with the guidance of Luke Skywalker, who is "
        "unsettled by the strength of her powers. Meanwhile, the Resistance prepares to do battle "
        "with the First Order.",
        "Rian",
        "Johnson",
    ),
    (
        "401650",
        "DC Super Hero Girls: Hero of the Year",
        "Wonder Woman, Supergirl, Batgirl, Harley Quinn, Bumblebee, Poison Ivy and Katana band "
        "together to navigate the twists and turns of high school in DC Super Hero Girls: Hero "
        "of the Year.",
        "Cecilia",
        "Aranovich",
    ),
    (
        "49026",
        "The Dark Knight Rises",
        "Following the death of District Attorney Harvey Dent, Batman assumes responsibility for "
        "Dent's crimes to protect the late attorney's reputation and is subsequently hunted by "
        "the Gotham City Police Department. Eight years later, Batman encounters the mysterious "
        "Selina Kyle and the villainous Bane, a new terrorist leader who overwhelms Gotham's "
        "finest. The Dark Knight resurfaces to protect a city that has branded him an enemy.",
        "Christopher",
        "Nolan",
    ),
    (
        "271110",
        "Captain America: Civil War",
        "Following the events of Age of Ultron, the collective governments of the world pass an "
        "act designed to regulate all superhuman activity. This polarizes opinion amongst the "
        "Avengers, causing two factions to side with Iron Man or Captain America, which causes "
        "an epic battle between former allies.",
        "Anthony",
        "Russo",
    ),
]


def build_seed_movies() -> List[Movie]:
    """Return the seed catalog as Movie records, in display order."""
    return [new_movie(*row) for row in SEED_MOVIES]
