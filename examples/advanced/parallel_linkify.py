"""Thread safe: linkify 1000 strings in parallel with one Linkifier."""

from concurrent.futures import ThreadPoolExecutor

from autolinker import Linkifier, links

texts = [f"Message {i}: see https://example.com/items/{i} for details" for i in range(1000)]
linkifier = Linkifier()

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(linkifier.linkify, texts))

print(f"Linkified {len(results)} messages in parallel")
print("First message links:", [link.url for link in links(results[0])])
print("Last message links:", [link.url for link in links(results[-1])])
