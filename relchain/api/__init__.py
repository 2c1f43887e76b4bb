"""Read API over the view builders."""
