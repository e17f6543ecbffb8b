# Lets pytest import the 'knapsacks' package from a plain checkout.
