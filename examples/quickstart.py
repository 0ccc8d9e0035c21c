# %% [markdown]
# # fuzzykit: Quickstart
#
# Messy strings, typed by people:
#
# ```
# "pulp ficton"     vs  "Pulp Fiction"
# "MARHTA"          vs  "MARTHA"
# "report_v2.TXT"   vs  "*.txt"
# ```
#
# | Part | Topic |
# |------|-------|
# | 1 | Distances and similarities |
# | 2 | Ranking candidates with FuzzyMatcher |
# | 3 | Glob patterns |
# | 4 | Polars |

# %%
import polars as pl

import fuzzykit as fk

# %% [markdown]
# ## Part 1: Distances and similarities

# %%
print("levenshtein(kitten, sitting) =", fk.levenshtein("kitten", "sitting"))
print("jaro(MARTHA, MARHTA)         =", round(fk.jaro_similarity("MARTHA", "MARHTA"), 3))
print("jaro_winkler(MARTHA, MARHTA) =", round(fk.jaro_winkler_similarity("MARTHA", "MARHTA"), 3))
print("lcs(ABCBDAB, BDCABA)         =", fk.lcs_string("ABCBDAB", "BDCABA"))

# %% [markdown]
# ## Part 2: Ranking candidates
#
# Matching is case-sensitive, so fold case first when it should not count.

# %%
movies = [
    "The Shawshank Redemption",
    "The Godfather",
    "The Dark Knight",
    "Pulp Fiction",
    "Fight Club",
    "Inception",
]
query = "pulp ficton"
lowered = [m.lower() for m in movies]

matcher = fk.FuzzyMatcher(algorithm=fk.Algorithm.JARO_WINKLER, threshold=0.6)
print(f"User searched: '{query}'")
for m in matcher.closest_matches(query, lowered, limit=3):
    print(f"  [{m.score:.0%}] {movies[lowered.index(m.text)]}")

print("Above threshold:", [m.text for m in matcher.find_matches(query, lowered)])

# %% [markdown]
# ## Part 3: Glob patterns

# %%
files = ["report_v1.txt", "report_v2.TXT", "notes.md", "data[1].csv"]
print(fk.glob_filter("report_v[0-9].txt", files, case_sensitive=False))
print(fk.glob_filter("*[!t]", files))

# %% [markdown]
# ## Part 4: Polars

# %%
df = pl.DataFrame({"name": ["John Smith", "Jon Smith", "Jane Doe"]})
print(
    df.with_columns(
        score=pl.col("name").fuzzy.similarity("John Smith"),
        close=pl.col("name").fuzzy.is_similar("John Smith", min_similarity=0.9),
    )
)
