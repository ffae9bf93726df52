# muffet

Building blocks for a website link checker: option parsing, an HTTP client
with redirect handling, throttling and body decoding, link extraction from
HTML, robots.txt and sitemap.xml support, and formatting of results.

## Installation

```
pip install .
```

## Modules

- `muffet.arguments`: `get_arguments(argv)` parses link-checker options into
  an `Arguments` dataclass and raises `ArgumentError` on bad input.
  `help_text()` returns the usage text. `compile_regexps(patterns)` and
  `parse_headers(headers)` handle `--exclude` patterns and `--header`
  values of the form `Name: value`.
- `muffet.config`: `VERSION`, `AGENT_NAME`, the `Color` enum
  (`auto`, `always`, `never`) and `is_color_enabled(color, terminal)`.
- `muffet.http_client`: `HttpxHttpClientFactory().create(HttpClientOptions(...))`
  returns an `HttpxHttpClient`. Its `get(url)` follows up to
  `max_redirections` redirects, sends `Accept: */*` unless an `Accept` header
  is given, and raises `HttpError` for any final status outside 2xx.
  `HttpResponse.body()` decodes `gzip`, `deflate` and `br` bodies.
- `muffet.throttling`: `ThrottledHttpClient` wraps any `HttpClient` with a
  global connection limit and, per host, a connection limit and a request
  rate (`RateLimiter`, `HostThrottler`, `HostThrottlerPool`).
- `muffet.link_finder`: `parse_elements(body)` lists the start tags of an
  HTML document. `LinkFinder(excluded_patterns).find(elements, base)` maps
  each link in `a`, `frame`, `iframe`, `img`, `link`, `script`, `source` and
  `track` elements (including every `srcset` candidate) to `None`, or to the
  error raised for a malformed URL. Only `http`, `https` and relative links
  are kept. They are resolved against `base`.
- `muffet.site_files`: `RobotsTxtFetcher(client).fetch(url)` returns a
  `urllib.robotparser.RobotFileParser`. `SitemapFetcher(client).fetch(url)`
  returns the set of `<loc>` URLs. Both raise `SiteFileError`.
- `muffet.link_validator`: `LinkValidator(hostname, robots_data, sitemap_urls).validate(url)`
  tells whether a page is on the given host and allowed by robots.txt and
  the sitemap.
- `muffet.page`: the `Page`, `PageResult`, `SuccessLinkResult` and
  `ErrorLinkResult` dataclasses. `json_page_result(result)` returns the
  JSON-ready form of a result's failures.
- `muffet.formatter`: `PageResultFormatter(verbose, color).format(result)`
  renders a page URL followed by one sorted, indented line per link.
  Successful links are listed only when `verbose` is true. ANSI colours are
  used when `color` is true.
- `muffet.sync_utils`: thread-safe `Cache`, `ConcurrentStringSet`,
  `Semaphore` and `DaemonManager`.

## Example

```python
from muffet.arguments import get_arguments
from muffet.http_client import HttpClientOptions, HttpxHttpClientFactory
from muffet.link_finder import LinkFinder, parse_elements

args = get_arguments(
    ["-e", "logout", "--header", "Authorization: Bearer token", "https://example.com"]
)
client = HttpxHttpClientFactory().create(
    HttpClientOptions(headers=args.headers, timeout=args.timeout)
)
response = client.get(args.url)
links = LinkFinder(args.excluded_patterns).find(
    parse_elements(response.body()), response.url
)
```

## What it does not do

The package has no command-line program. It also has no crawler that
fetches pages, caches them, checks `#fragment` targets and follows links
across a site. The pieces above parse options, fetch URLs, find and filter
links, and format results, but the code that joins them into a
site-checking run is not included.