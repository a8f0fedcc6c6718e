import pandas as pd
from time import perf_counter
from id3py import ID3Classifier, is_unknown

df = pd.DataFrame(
    [
        ("Sunny", "Hot", "High", "Weak", "No"),
        ("Sunny", "Hot", "High", "Strong", "No"),
        ("Overcast", "Hot", "High", "Weak", "Yes"),
        ("Rain", "Mild", "High", "Weak", "Yes"),
        ("Rain", "Cool", "Normal", "Weak", "Yes"),
        ("Rain", "Cool", "Normal", "Strong", "No"),
        ("Overcast", "Cool", "Normal", "Strong", "Yes"),
        ("Sunny", "Mild", "High", "Weak", "No"),
        ("Sunny", "Cool", "Normal", "Weak", "Yes"),
        ("Rain", "Mild", "Normal", "Weak", "Yes"),
        ("Sunny", "Mild", "Normal", "Strong", "Yes"),
        ("Overcast", "Mild", "High", "Strong", "Yes"),
        ("Overcast", "Hot", "Normal", "Weak", "Yes"),
        ("Rain", "Mild", "High", "Strong", "No"),
    ],
    columns=["outlook", "temperature", "humidity", "wind", "play"],
)
feats = ["outlook", "temperature", "humidity", "wind"]

clf = ID3Classifier(target_name="play")
t0 = perf_counter(); clf.fit(df[feats], df["play"]); print(f"fit: {perf_counter()-t0:.4f} s")
clf.print_tree()
print()
for rule in clf.export_rules():
    print(rule)

queries = [
    {"outlook": "Sunny", "humidity": "Normal"},
    {"outlook": "Rain", "wind": "Strong"},
    {"outlook": "Sunny"},
    {"outlook": "Snowy"},
]
for q in queries:
    label = clf.predict_one(q)
    print(q, "->", "(no branch for this query)" if is_unknown(label) else label)

try:
    clf.export_graphviz("tennis_tree", format="dot")
except RuntimeError as e:
    print(f"Skipping Graphviz export: {e}")
