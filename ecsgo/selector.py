import questionary

from .exceptions import SelectionCancelled


def questionary_prompt(message, choices):
    """Ask the operator to pick one of ``choices``, a list of (title, key) pairs.

    Returns the key of the chosen entry. ``unsafe_ask`` is used so an
    interrupt inside the prompt raises instead of quietly returning None.
    """
    try:
        answer = questionary.select(
            message,
            choices=[questionary.Choice(title=title, value=key) for title, key in choices],
        ).unsafe_ask()
    except (KeyboardInterrupt, EOFError):
        raise SelectionCancelled()
    if answer is None:
        raise SelectionCancelled()
    return answer


def select_one(message, options, prompt=None, skip_single=False):
    """Return the payload of the option the operator picks.

    ``options`` is an ordered sequence of ``(label, payload)`` pairs. Each
    option is keyed by its position; only that key travels through the
    prompt, so labels never have to be parsed back into payloads.
    """
    options = list(options)
    if not options:
        raise ValueError("select_one needs at least one option")
    if skip_single and len(options) == 1:
        return options[0][1]

    prompt = prompt or questionary_prompt
    index = {str(i): payload for i, (_, payload) in enumerate(options)}
    key = prompt(message, [(label, str(i)) for i, (label, _) in enumerate(options)])
    try:
        return index[key]
    except KeyError:
        raise SelectionCancelled(f"Unknown selection: {key!r}")
