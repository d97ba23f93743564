r"""
Built-in Jinja2 template bodies.

Every ``Report`` field is available as a top-level variable, along with the
helpers registered by ``ReportRenderer``.
"""

__all__ = ["CSV_COLUMNS", "CSV_TEMPLATE", "DEFAULT_TEMPLATE"]

DEFAULT_TEMPLATE = """
Summary:
  Total:\t{{ format_number_to_millis(total) }} millis
  Slowest:\t{{ format_number_to_millis(slowest) }} millis
  Fastest:\t{{ format_number_to_millis(fastest) }} millis
  Average:\t{{ format_number_to_millis(average) }} millis
  Requests/sec:\t{{ format_number(rps) }}
{%- if size_total > 0 %}
  Total data:\t{{ size_total }} bytes
  Size/request:\t{{ size_req }} bytes
{%- endif %}

Response time histogram:
{{ render_histogram(histogram) }}

Latency distribution:
{%- for entry in latency_distribution %}
  {{ entry.percentage }}% in {{ format_number_to_millis(entry.latency) }} millis
{%- endfor %}

Details (average, fastest, slowest):
  DNS+dialup:\t{{ format_number_to_millis(avg_conn) }} millis, \
{{ format_number_to_millis(conn_max) }} millis, {{ format_number_to_millis(conn_min) }} millis
  DNS-lookup:\t{{ format_number_to_millis(avg_dns) }} millis, \
{{ format_number_to_millis(dns_max) }} millis, {{ format_number_to_millis(dns_min) }} millis
  req write:\t{{ format_number_to_millis(avg_req) }} millis, \
{{ format_number_to_millis(req_max) }} millis, {{ format_number_to_millis(req_min) }} millis
  resp wait:\t{{ format_number_to_millis(avg_delay) }} millis, \
{{ format_number_to_millis(delay_max) }} millis, {{ format_number_to_millis(delay_min) }} millis
  resp read:\t{{ format_number_to_millis(avg_res) }} millis, \
{{ format_number_to_millis(res_max) }} millis, {{ format_number_to_millis(res_min) }} millis

Status code distribution:
{%- for code, count in status_code_dist.items() %}
  [{{ code }}]\t{{ count }} responses
{%- endfor %}
{% if error_dist %}
Error distribution:
{%- for message, count in error_dist.items() %}
  [{{ count }}]\t{{ message }}
{%- endfor %}
{% endif %}
"""

# Column order and names are part of the CSV contract.
CSV_COLUMNS = (
    "response-time",
    "DNS+dialup",
    "DNS",
    "Request-write",
    "Response-delay",
    "Response-read",
    "status-code",
    "offset",
)

CSV_TEMPLATE = (
    ",".join(CSV_COLUMNS)
    + "{% for lat in lats %}{% set i = loop.index0 %}\n"
    "{{ format_number_to_millis(lat) }},"
    "{{ format_number_to_millis(conn_lats[i]) }},"
    "{{ format_number_to_millis(dns_lats[i]) }},"
    "{{ format_number_to_millis(req_lats[i]) }},"
    "{{ format_number_to_millis(delay_lats[i]) }},"
    "{{ format_number_to_millis(res_lats[i]) }},"
    "{{ format_number_int(status_codes[i]) }},"
    "{{ format_number_to_millis(offsets[i]) }}"
    "{% endfor %}"
)
