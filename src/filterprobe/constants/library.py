"""Filtering library build layout and bridge script."""

from __future__ import annotations

LIBRARY_DIR_TEMPLATE: str = "adblocker-{version}.d"
LIBRARY_STAGING_SUFFIX: str = ".staging"
SOURCE_CHECKOUT_DIRNAME: str = "adblocker"
LIBRARY_TAG_TEMPLATE: str = "tags/v{version}"
EXTENSION_REF_TEMPLATE: str = "tags/v{version}"
LIBRARY_ENTRY_POINT: str = "dist/esm/index.js"
PACKAGE_DESCRIPTOR: str = "package.json"
DIST_DIRNAME: str = "dist"

GIT_COMMAND: str = "git"
NODE_COMMAND: str = "node"

BRIDGE_MODE_NETWORK: str = "network"
BRIDGE_MODE_COSMETIC: str = "cosmetic"

# Reads one JSON job from stdin and prints JSON filter descriptors.
BRIDGE_SCRIPT: str = """
import { readFileSync } from 'node:fs';
import { pathToFileURL } from 'node:url';

const job = JSON.parse(readFileSync(0, 'utf8'));
const library = await import(pathToFileURL(job.entry).href);
const engine = library.FiltersEngine.deserialize(new Uint8Array(Buffer.from(job.engine, 'base64')));
engine.updateEnv(new Map(job.env.map((flag) => [flag, true])));
const request = library.Request.fromRawDetails(job.request);

const describe = (filter) => {
  if (filter === undefined) {
    return null;
  }
  const cosmetic = filter.isCosmeticFilter();
  const script = cosmetic && filter.isScriptInject() ? filter.parseScript() : undefined;
  return {
    kind: cosmetic ? 'cosmetic' : 'network',
    text: filter.toString(),
    script: script === undefined ? null : { name: script.name, args: script.args },
    has_domains: cosmetic && filter.domains !== undefined,
  };
};

let output;
if (job.mode === 'network') {
  output = [...engine.matchAll(request)].map(describe);
} else {
  const { matches } = engine.matchCosmeticFilters({ ...request, ...job.options });
  output = matches.map(({ filter, exception }) => ({
    filter: describe(filter),
    exception: describe(exception),
  }));
}
process.stdout.write(JSON.stringify(output));
"""
