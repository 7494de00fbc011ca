"""
Step definitions for System DNS acceptance tests.
"""

from concurrent.futures import ThreadPoolExecutor

from behave import given, when, then

from system_dns import ConfigUnavailable, SystemDNSQuery


def split_addresses(text):
    return [address.strip() for address in text.split(",") if address.strip()]


@given('the host resolver configuration lists "{servers}"')
def step_impl(context, servers):
    """Write a resolver configuration with the given nameservers."""
    lines = ["# Generated for acceptance tests", "search example.com"]
    lines.extend(f"nameserver {address}" for address in split_addresses(servers))
    context.resolv_conf.write_text("\n".join(lines) + "\n")


@given("the host resolver configuration lists no servers")
def step_impl(context):
    """Write a resolver configuration without nameservers."""
    context.resolv_conf.write_text("search example.com\n")


@given("the host resolver configuration is missing")
def step_impl(context):
    """Make sure no resolver configuration exists."""
    if context.resolv_conf.exists():
        context.resolv_conf.unlink()


@given("strict mode is enabled")
def step_impl(context):
    """Enable strict error reporting."""
    context.test_config["system_dns"]["strict"] = True


@given('a static fallback source lists "{servers}"')
def step_impl(context, servers):
    """Add a static source after the resolver configuration."""
    settings = context.test_config["system_dns"]
    settings["sources"] = ["resolver", "static"]
    settings["providers"]["static"] = {"servers": split_addresses(servers)}


@when("I query the system DNS servers")
def step_impl(context):
    """Run the query once."""
    try:
        context.source, context.result = SystemDNSQuery(context.test_config).query()
    except ConfigUnavailable as e:
        context.error = e


@when("I query the system DNS servers twice")
def step_impl(context):
    """Run the query twice."""
    query = SystemDNSQuery(context.test_config)
    context.results = [query.get_servers(), query.get_servers()]


@when("I query the system DNS servers from {count:d} threads")
def step_impl(context, count):
    """Run the query concurrently."""
    query = SystemDNSQuery(context.test_config)
    with ThreadPoolExecutor(max_workers=count) as executor:
        context.results = list(
            executor.map(lambda _: query.get_servers(), range(count * 4))
        )


@then('the result should be "{servers}"')
def step_impl(context, servers):
    """Verify the query result."""
    assert context.error is None, f"Query failed: {context.error}"
    expected = split_addresses(servers)
    assert context.result == expected, f"Expected {expected}, got {context.result}"


@then("the result should be empty")
def step_impl(context):
    """Verify the query returned no servers."""
    assert context.error is None, f"Query failed: {context.error}"
    assert context.result == [], f"Expected no servers, got {context.result}"


@then("the configuration should be reported unavailable")
def step_impl(context):
    """Verify strict mode raised ConfigUnavailable."""
    assert isinstance(context.error, ConfigUnavailable), "Expected ConfigUnavailable"


@then("both results should be identical")
def step_impl(context):
    """Verify idempotence."""
    first, second = context.results
    assert first == second, f"Results differ: {first} != {second}"


@then('every result should be "{servers}"')
def step_impl(context, servers):
    """Verify all concurrent results agree."""
    expected = split_addresses(servers)
    for result in context.results:
        assert result == expected, f"Expected {expected}, got {result}"


@then('the answering source should be "{source}"')
def step_impl(context, source):
    """Verify which provider answered."""
    assert context.source == source, f"Expected {source}, got {context.source}"
